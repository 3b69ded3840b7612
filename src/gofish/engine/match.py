from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Literal

from .actions import COMPUTER, PLAYER, Action, AskAction, PassAction
from .deck import create_deck, shuffle_deck
from .types import BOOK_SIZE, DECK_SIZE, RANKS, Card

Event = dict[str, object]
Phase = Literal["awaiting_player_ask", "awaiting_computer_reply"]
OutcomeKind = Literal["collected", "lucky_draw", "go_fish", "no_cards"]

AWAITING_PLAYER: Phase = "awaiting_player_ask"
AWAITING_COMPUTER: Phase = "awaiting_computer_reply"


@dataclass(frozen=True)
class GameConfig:
    hand_size: int = 7
    computer_delay: float = 1.0  # seconds
    seed: int | None = None


@dataclass
class PlayerState:
    hand: list[Card]
    books: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TurnOutcome:
    kind: OutcomeKind
    rank: str
    count: int
    drawn: Card | None
    message: str


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None
    outcome: TurnOutcome | None = None
    message: str = ""


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    players: list[PlayerState]
    draw_pile: list[Card]
    phase: Phase = AWAITING_PLAYER
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def player(self) -> PlayerState:
        return self.players[PLAYER]

    @property
    def computer(self) -> PlayerState:
        return self.players[COMPUTER]

    @property
    def current_player(self) -> int:
        return PLAYER if self.phase == AWAITING_PLAYER else COMPUTER

    def opponent(self, player: int) -> int:
        return 1 - player


def fresh_seed() -> int:
    return random.randrange(2**31)


def held_ranks(hand: list[Card]) -> list[str]:
    """Distinct ranks in `hand`, in rank order."""
    return sorted({card.rank for card in hand}, key=_rank_order)


def _rank_order(rank: str) -> int:
    return RANKS.index(rank) if rank in RANKS else len(RANKS)


def total_cards(state: GameState) -> int:
    """Cards in hands + draw pile + books. Always 52."""
    in_hands = sum(len(ps.hand) for ps in state.players)
    in_books = sum(len(ps.books) for ps in state.players) * BOOK_SIZE
    return in_hands + len(state.draw_pile) + in_books


def check_for_books(hand: list[Card], books: list[str]) -> list[Card]:
    """Move every completed four-of-a-kind out of `hand` into `books`.

    `hand` is updated in place and returned for convenience. Ranks are
    recorded in order of first appearance in the hand.
    """
    counts = Counter(card.rank for card in hand)
    completed = [rank for rank, n in counts.items() if n == BOOK_SIZE]
    if not completed:
        return hand
    books.extend(completed)
    hand[:] = [card for card in hand if card.rank not in completed]
    return hand


def take_turn(
    asker_hand: list[Card],
    responder_hand: list[Card],
    rank: str,
    draw_pile: list[Card],
) -> TurnOutcome:
    """Resolve a single ask. Mutates the hands and draw pile, never the books."""
    matching = [card for card in responder_hand if card.rank == rank]
    if matching:
        asker_hand.extend(matching)
        responder_hand[:] = [card for card in responder_hand if card.rank != rank]
        return TurnOutcome(
            kind="collected",
            rank=rank,
            count=len(matching),
            drawn=None,
            message=f"{len(matching)} card(s) collected!",
        )

    if draw_pile:
        drawn = draw_pile.pop()
        asker_hand.append(drawn)
        if drawn.rank == rank:
            return TurnOutcome(
                kind="lucky_draw", rank=rank, count=0, drawn=drawn, message="You drew the card you asked for!"
            )
        return TurnOutcome(kind="go_fish", rank=rank, count=0, drawn=drawn, message="Go Fish!")

    return TurnOutcome(kind="no_cards", rank=rank, count=0, drawn=None, message="No cards left to draw!")


def _log_outcome(state: GameState, player: int, outcome: TurnOutcome) -> None:
    if outcome.kind == "collected":
        state.event_log.append(
            {
                "type": "CARDS_TRANSFERRED",
                "player": player,
                "from_player": state.opponent(player),
                "rank": outcome.rank,
                "count": outcome.count,
            }
        )
    elif outcome.drawn is not None:
        state.event_log.append(
            {
                "type": "CARD_DRAWN",
                "player": player,
                "card": outcome.drawn.label,
                "lucky": outcome.kind == "lucky_draw",
                "draw_pile": len(state.draw_pile),
            }
        )
    else:
        state.event_log.append({"type": "NO_CARDS_LEFT", "player": player, "rank": outcome.rank})


def _check_books_and_log(state: GameState, player: int) -> None:
    ps = state.players[player]
    before = len(ps.books)
    check_for_books(ps.hand, ps.books)
    for rank in ps.books[before:]:
        state.event_log.append({"type": "BOOK_COMPLETED", "player": player, "rank": rank})


def _advance_phase(state: GameState) -> None:
    state.phase = AWAITING_COMPUTER if state.phase == AWAITING_PLAYER else AWAITING_PLAYER


def _ask(state: GameState, action: AskAction) -> StepResult:
    before = len(state.event_log)
    asker = state.players[action.player]
    responder = state.players[state.opponent(action.player)]

    state.event_log.append({"type": "ASK", "player": action.player, "rank": action.rank})
    outcome = take_turn(asker.hand, responder.hand, action.rank, state.draw_pile)
    _log_outcome(state, action.player, outcome)
    _check_books_and_log(state, action.player)
    _advance_phase(state)

    message = outcome.message
    if action.player == COMPUTER:
        message = f"Computer asks for: {action.rank}. {outcome.message}"
    return StepResult(ok=True, events=state.event_log[before:], outcome=outcome, message=message)


def _pass(state: GameState, action: PassAction) -> StepResult:
    if state.players[action.player].hand:
        return StepResult(ok=False, events=[], error="Cannot pass while holding cards.")
    before = len(state.event_log)
    state.event_log.append({"type": "TURN_SKIPPED", "player": action.player, "reason": "empty_hand"})
    _advance_phase(state)
    message = "Computer has no cards and passes." if action.player == COMPUTER else "You have no cards and pass."
    return StepResult(ok=True, events=state.event_log[before:], message=message)


def step(state: GameState, action: Action) -> StepResult:
    """Apply one half-turn to the game state.

    The phase guard rejects a player ask while the computer's reply is still
    outstanding (and vice versa). Rejected actions leave the state untouched
    apart from the action log.
    """
    # Log first, so replay sees every attempted action
    state.action_log.append(action)

    if action.player != state.current_player:
        if action.player == PLAYER:
            return StepResult(ok=False, events=[], error="Wait for the computer to reply.")
        return StepResult(ok=False, events=[], error="Not the computer's turn.")

    if isinstance(action, AskAction):
        return _ask(state, action)
    if isinstance(action, PassAction):
        return _pass(state, action)
    return StepResult(ok=False, events=[], error="Unknown action.")


def new_game(seed: int | None = None, config: GameConfig | None = None) -> GameState:
    """Shuffle a fresh deck and deal both hands.

    The player gets the first `hand_size` cards of the shuffled deck, the
    computer the next `hand_size`; whatever is left is the draw pile.
    """
    cfg = config or GameConfig()
    if cfg.hand_size < 0 or cfg.hand_size * 2 > DECK_SIZE:
        raise ValueError(f"Cannot deal two hands of {cfg.hand_size} from {DECK_SIZE} cards.")

    if seed is None:
        seed = cfg.seed if cfg.seed is not None else fresh_seed()
    rng = random.Random(seed)

    deck = create_deck()
    shuffle_deck(deck, rng)

    player_hand = deck[: cfg.hand_size]
    del deck[: cfg.hand_size]
    computer_hand = deck[: cfg.hand_size]
    del deck[: cfg.hand_size]

    state = GameState(
        config=cfg,
        seed=seed,
        rng=rng,
        players=[PlayerState(hand=player_hand), PlayerState(hand=computer_hand)],
        draw_pile=deck,
    )
    state.event_log.append(
        {"type": "GAME_STARTED", "seed": seed, "hand_size": cfg.hand_size, "draw_pile": len(deck)}
    )
    return state


def replay(seed: int, actions: Iterable[Action], config: GameConfig | None = None) -> GameState:
    """Rebuild a game from its action log.

    Computer asks are assumed to come from `ai_take_turn`, which draws the
    rank from `state.rng`; the same draw is repeated here so the RNG ends up
    where the original game left it.
    """
    state = new_game(seed=seed, config=config)
    for a in actions:
        if isinstance(a, AskAction) and a.player == COMPUTER and state.current_player == COMPUTER:
            ranks = held_ranks(state.computer.hand)
            if ranks:
                state.rng.choice(ranks)
        step(state, a)
    return state
