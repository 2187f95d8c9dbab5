"""Card abstractions and helpers for the patience engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 13

_RANK_CODES: Final[dict[int, str]] = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Color(str, Enum):
    """The two card colours."""

    BLACK = "black"
    RED = "red"


class Suit(str, Enum):
    """Enumeration of the four suits, in foundation order."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @property
    def color(self) -> Color:
        if self in (Suit.SPADES, Suit.CLUBS):
            return Color.BLACK
        return Color.RED

    @property
    def symbol(self) -> str:
        """Return the single-character glyph used on the board."""

        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♡",
    Suit.DIAMONDS: "♢",
    Suit.CLUBS: "♣",
}


def rank_code(rank: int) -> str:
    """Return the short textual rank (``A``, ``2`` … ``10``, ``J``, ``Q``, ``K``)."""

    return _RANK_CODES.get(rank, str(rank))


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"rank must be within [{MIN_RANK}, {MAX_RANK}], got {self.rank}")

    @property
    def color(self) -> Color:
        return self.suit.color

    @property
    def code(self) -> str:
        """Compact ASCII form such as ``QH`` or ``10S``."""

        return f"{rank_code(self.rank)}{self.suit.value}"

    def label(self) -> str:
        """Create the three-character cell used by the text board."""

        return f"{rank_code(self.rank):>2}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label()


def card_from_code(code: str) -> Card:
    """Parse a compact code (``AS``, ``10d``, ``kc``) into a :class:`Card`."""

    text = code.strip().upper()
    if len(text) < 2:
        raise ValueError(f"invalid card code '{code}'")
    face, suit_symbol = text[:-1], text[-1]
    try:
        suit = Suit(suit_symbol)
    except ValueError:
        raise ValueError(f"invalid card code '{code}'") from None
    for rank, short in _RANK_CODES.items():
        if face == short:
            return Card(suit, rank)
    if not face.isdigit():
        raise ValueError(f"invalid card code '{code}'")
    return Card(suit, int(face))


def iter_full_deck() -> Iterable[Card]:
    """Yield all 52 cards of a fresh deck in a fixed order."""

    for suit in Suit:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            yield Card(suit, rank)
