from __future__ import annotations

from dataclasses import dataclass

from .actions import Action, AskAction, PassAction
from .match import GameState, Phase
from .types import Card


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, AskAction):
        return {"type": "ask", "player": a.player, "rank": a.rank}
    if isinstance(a, PassAction):
        return {"type": "pass", "player": a.player}
    # should be unreachable
    return {"type": "unknown"}


def _card_to_dict(c: Card) -> dict[str, str]:
    return {"rank": c.rank, "suit": c.suit}


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "seed": state.seed,
        "phase": state.phase,
        "players": [
            {"hand": [_card_to_dict(c) for c in ps.hand], "books": list(ps.books)} for ps in state.players
        ],
        "draw_pile": [_card_to_dict(c) for c in state.draw_pile],
        "action_log": [action_to_dict(a) for a in state.action_log],
    }


@dataclass(frozen=True)
class TableView:
    """What the client is allowed to show. The computer's hand is left out."""

    player_hand: tuple[str, ...]
    player_books: tuple[str, ...]
    computer_books: tuple[str, ...]
    draw_pile: int
    phase: Phase
    message: str


def table_view(state: GameState, message: str = "") -> TableView:
    return TableView(
        player_hand=tuple(c.label for c in state.player.hand),
        player_books=tuple(state.player.books),
        computer_books=tuple(state.computer.books),
        draw_pile=len(state.draw_pile),
        phase=state.phase,
        message=message,
    )
