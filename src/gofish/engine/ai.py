from __future__ import annotations

from .actions import COMPUTER, AskAction, PassAction
from .match import GameState, StepResult, held_ranks, step


def choose_rank(state: GameState, player: int = COMPUTER) -> str | None:
    """Pick a rank uniformly from the distinct ranks in `player`'s hand.

    Uses the engine RNG (`state.rng`) so it stays deterministic for a seed.
    Returns None for an empty hand.
    """
    ranks = held_ranks(state.players[player].hand)
    if not ranks:
        return None
    return state.rng.choice(ranks)


def ai_take_turn(state: GameState, player: int = COMPUTER) -> StepResult:
    """Play the computer's half-turn: ask for a random held rank, or pass."""
    if state.current_player != player:
        return StepResult(ok=False, events=[], error="Not the computer's turn.")
    rank = choose_rank(state, player)
    if rank is None:
        return step(state, PassAction(player=player))
    return step(state, AskAction(player=player, rank=rank))
