from __future__ import annotations

from dataclasses import dataclass

RANKS: tuple[str, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King", "Ace")
SUITS: tuple[str, ...] = ("Hearts", "Diamonds", "Clubs", "Spades")

BOOK_SIZE = 4
DECK_SIZE = len(RANKS) * len(SUITS)

_RANK_LOOKUP = {r.lower(): r for r in RANKS}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    @property
    def label(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __str__(self) -> str:
        return self.label


def normalize_rank(text: str) -> str:
    """Map free-text input onto a rank label.

    Known ranks are matched case-insensitively ("queen" -> "Queen"). Anything
    else is returned stripped but otherwise untouched; the engine treats it as
    a rank nobody holds.
    """
    cleaned = text.strip()
    return _RANK_LOOKUP.get(cleaned.lower(), cleaned)
