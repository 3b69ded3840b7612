from __future__ import annotations

from dataclasses import dataclass

PLAYER = 0
COMPUTER = 1


@dataclass(frozen=True)
class AskAction:
    player: int
    rank: str

    @staticmethod
    def by_player(rank: str) -> "AskAction":
        return AskAction(player=PLAYER, rank=rank)

    @staticmethod
    def by_computer(rank: str) -> "AskAction":
        return AskAction(player=COMPUTER, rank=rank)


@dataclass(frozen=True)
class PassAction:
    """Give up a turn; only legal with an empty hand."""

    player: int


Action = AskAction | PassAction
