"""Deterministic, headless rules engine for Go Fish.

IMPORTANT: This package must never import pygame.
"""

from .actions import COMPUTER, PLAYER, AskAction, PassAction
from .deck import create_deck, shuffle_deck
from .match import GameConfig, GameState, check_for_books, new_game, step, take_turn
from .session import GameSession
from .types import RANKS, SUITS, Card

__all__ = [
    "AskAction",
    "COMPUTER",
    "Card",
    "GameConfig",
    "GameSession",
    "GameState",
    "PLAYER",
    "PassAction",
    "RANKS",
    "SUITS",
    "check_for_books",
    "create_deck",
    "new_game",
    "shuffle_deck",
    "step",
    "take_turn",
]
