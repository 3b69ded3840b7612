from __future__ import annotations

import random

from .types import RANKS, SUITS, Card


def create_deck() -> list[Card]:
    # Suit-major, rank-minor: Hearts 2..Ace, then Diamonds, Clubs, Spades.
    return [Card(rank=rank, suit=suit) for suit in SUITS for rank in RANKS]


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> None:
    """Fisher-Yates shuffle, in place.

    Pass the engine RNG to keep a game reproducible from its seed.
    """
    r = rng if rng is not None else random.Random()
    for i in range(len(deck) - 1, 0, -1):
        j = r.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
