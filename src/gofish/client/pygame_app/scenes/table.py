from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from gofish.engine.match import StepResult, fresh_seed, new_game
from gofish.engine.session import GameSession
from gofish.engine.types import normalize_rank

from ..app import GameContext
from ..scene_base import SceneTransition
from ..ui import Button, TextInput, draw_text

CARD_W, CARD_H = 150, 56
CARD_GAP = 8
HAND_X, HAND_Y = 40, 90


class TableScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self.session = self._new_session(self.ctx.seed_override)

        bottom = self.ctx.screen.get_height()
        self.rank_input = TextInput(
            rect=pygame.Rect(40, bottom - 80, 320, 40),
            text="",
            on_submit=self._on_submit,
            placeholder="Enter a rank (e.g., Ace, 7)",
        )
        self.btn_ask = Button(rect=pygame.Rect(380, bottom - 80, 120, 40), text="Ask", on_click=self._on_ask)
        self.btn_new = Button(
            rect=pygame.Rect(self.ctx.screen.get_width() - 180, 20, 140, 40),
            text="New Game",
            on_click=self._on_new_game,
        )

    def _new_session(self, seed: int | None) -> GameSession:
        state = new_game(seed=seed, config=self.ctx.config)
        self.ctx.telemetry.log_events(state.event_log)
        return GameSession(state)

    def _record(self, res: StepResult | None) -> None:
        if res is None:
            return
        if res.ok:
            self.ctx.telemetry.log_events(res.events)
        else:
            self.ctx.telemetry.log("rejected", {"error": res.error or ""})

    def _on_submit(self, text: str) -> None:
        rank = normalize_rank(text)
        if not rank:
            return
        if self.session.waiting:
            # Keep the typed rank for when the reply has landed
            self.rank_input.text = text
        self._record(self.session.ask(rank))

    def _on_ask(self) -> None:
        self.rank_input.submit()

    def _on_new_game(self) -> None:
        self.session.cancel_pending()
        # Explicit seed: a configured or --seed value would deal the same game again
        self.session = self._new_session(fresh_seed())

    def handle_event(self, event: pygame.event.Event) -> None:
        self.btn_new.handle_event(event)
        self.btn_ask.handle_event(event)
        self.rank_input.handle_event(event)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            hit = self._hit_test_hand(event.pos)
            if hit is not None:
                self.rank_input.text = self.session.state.player.hand[hit].rank
                self.rank_input.active = True

    def _card_rect(self, index: int) -> pygame.Rect:
        cols = max(1, (self.ctx.screen.get_width() - 2 * HAND_X) // (CARD_W + CARD_GAP))
        row, col = divmod(index, cols)
        return pygame.Rect(HAND_X + col * (CARD_W + CARD_GAP), HAND_Y + row * (CARD_H + CARD_GAP), CARD_W, CARD_H)

    def _hit_test_hand(self, pos: tuple[int, int]) -> int | None:
        for i in range(len(self.session.state.player.hand)):
            if self._card_rect(i).collidepoint(pos):
                return i
        return None

    def update(self, dt: float) -> SceneTransition | None:
        self._record(self.session.update(dt))
        return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((8, 40, 24))
        fonts = self.ctx.assets.fonts
        view = self.session.view()

        draw_text(screen, fonts.big, "Your Hand", (HAND_X, 40))
        self.btn_new.draw(screen, fonts.ui)

        for i, label in enumerate(view.player_hand):
            rect = self._card_rect(i)
            pygame.draw.rect(screen, (245, 245, 245), rect, border_radius=5)
            pygame.draw.rect(screen, (0, 0, 0), rect, width=1, border_radius=5)
            color = (200, 30, 30) if label.endswith(("Hearts", "Diamonds")) else (20, 20, 20)
            draw_text(screen, fonts.small, label, (rect.x + 10, rect.y + 20), color=color)

        info_y = screen.get_height() - 240
        draw_text(screen, fonts.ui, view.message, (40, info_y), color=(240, 200, 120))
        draw_text(screen, fonts.ui, f"Your books: {', '.join(view.player_books)}", (40, info_y + 40))
        draw_text(screen, fonts.ui, f"Computer books: {', '.join(view.computer_books)}", (40, info_y + 70))
        draw_text(screen, fonts.ui, f"Cards in draw pile: {view.draw_pile}", (40, info_y + 100))

        self.btn_ask.enabled = not self.session.waiting
        self.rank_input.draw(screen, fonts.ui)
        self.btn_ask.draw(screen, fonts.ui)
        if self.session.waiting:
            draw_text(screen, fonts.small, "Computer is thinking...", (520, screen.get_height() - 70), color=(180, 180, 220))
