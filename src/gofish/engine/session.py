from __future__ import annotations

from .actions import AskAction
from .ai import ai_take_turn
from .match import GameState, StepResult, step
from .serialize import TableView, table_view

WELCOME = "Welcome to Go Fish!"


class GameSession:
    """Owns one game and alternates a player ask with a delayed computer reply.

    The reply is a countdown advanced by `update(dt)` from the client loop, so
    nothing runs behind the caller's back. While it is pending the session
    refuses new asks.
    """

    def __init__(self, state: GameState, delay: float | None = None) -> None:
        self.state = state
        self.delay = state.config.computer_delay if delay is None else max(0.0, delay)
        self.message = WELCOME
        self.closed = False
        self._pending: float | None = None

    @property
    def waiting(self) -> bool:
        return self._pending is not None

    @property
    def time_remaining(self) -> float:
        return self._pending if self._pending is not None else 0.0

    def ask(self, rank: str) -> StepResult:
        if self.closed:
            return self._reject("This game has been closed.")
        if self._pending is not None:
            return self._reject("Wait for the computer to reply.")
        res = step(self.state, AskAction.by_player(rank))
        if not res.ok:
            self.message = res.error or "Invalid action."
            return res
        self.message = res.message
        self._pending = self.delay
        return res

    def _reject(self, error: str) -> StepResult:
        self.message = error
        return StepResult(ok=False, events=[], error=error)

    def update(self, dt: float) -> StepResult | None:
        """Advance the reply countdown; returns the reply once it has run."""
        if self._pending is None:
            return None
        self._pending -= dt
        if self._pending > 0:
            return None
        return self.flush()

    def flush(self) -> StepResult | None:
        """Run a pending computer reply right now."""
        if self._pending is None:
            return None
        self._pending = None
        res = ai_take_turn(self.state)
        self.message = res.message if res.ok else (res.error or "")
        return res

    def cancel_pending(self) -> bool:
        """Drop the scheduled reply and close the session.

        Used when the game is abandoned (new game, quit). Returns True if a
        reply was actually pending.
        """
        dropped = self._pending is not None
        self._pending = None
        self.closed = True
        return dropped

    def view(self) -> TableView:
        return table_view(self.state, self.message)
