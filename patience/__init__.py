"""Top-level package for the patience game engine."""

from . import board, cards, deck, locations, session

__all__ = [
    "board",
    "cards",
    "deck",
    "locations",
    "session",
]
