"""Board layout, label addressing and the move rules engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Sequence

from .cards import MAX_RANK, Card, Suit
from .deck import DECK_SIZE
from .locations import Column, Foundation, Location, SpotInHand

__all__ = [
    "NUM_FOUNDATIONS",
    "NUM_COLUMNS",
    "NUM_SPOTS_IN_HAND",
    "FOUNDATION_LABELS",
    "COLUMN_LABELS",
    "HAND_LABELS",
    "ALL_LABELS",
    "ORIGIN_LABELS",
    "DESTINATION_LABELS",
    "InvalidLabel",
    "IllegalMove",
    "LocationKind",
    "VictoryState",
    "Movement",
    "resolve_label",
    "Board",
]

logger = logging.getLogger(__name__)

NUM_FOUNDATIONS: Final[int] = len(Suit)
NUM_COLUMNS: Final[int] = 9
NUM_SPOTS_IN_HAND: Final[int] = 7

FOUNDATION_LABELS: Final[str] = "abcd"
COLUMN_LABELS: Final[str] = "efghijklm"
HAND_LABELS: Final[str] = "nopqrst"
ALL_LABELS: Final[str] = FOUNDATION_LABELS + COLUMN_LABELS + HAND_LABELS

# Cards never leave a foundation and never enter a hand cell in normal play.
ORIGIN_LABELS: Final[str] = COLUMN_LABELS + HAND_LABELS
DESTINATION_LABELS: Final[str] = FOUNDATION_LABELS + COLUMN_LABELS


class InvalidLabel(ValueError):
    """Raised when a label does not address any board location."""


class IllegalMove(RuntimeError):
    """Raised when executing a movement the rules do not permit."""


class LocationKind(str, Enum):
    """The three groups of board locations."""

    FOUNDATION = "foundation"
    COLUMN = "column"
    HAND = "hand"


class VictoryState(str, Enum):
    ONGOING = "ongoing"
    WON = "won"


@dataclass(frozen=True, slots=True)
class Movement:
    """A proposed transfer of the origin's active card to the destination."""

    origin: str
    destination: str

    @classmethod
    def parse(cls, text: str) -> "Movement":
        """Build a movement from two label characters, e.g. ``"ea"``."""

        if len(text) != 2:
            raise InvalidLabel(f"expected two labels, got {text!r}")
        return cls(text[0], text[1])

    def __str__(self) -> str:
        return f"{self.origin}->{self.destination}"


def resolve_label(label: str) -> tuple[LocationKind, int]:
    """Map a single-character label to its location group and index."""

    if len(label) == 1:
        if "a" <= label <= "d":
            return LocationKind.FOUNDATION, ord(label) - ord("a")
        if "e" <= label <= "m":
            return LocationKind.COLUMN, ord(label) - ord("e")
        if "n" <= label <= "t":
            return LocationKind.HAND, ord(label) - ord("n")
    raise InvalidLabel(f"label {label!r} is outside a-t")


class Board:
    """Four foundations, nine columns and seven hand cells.

    The board is dealt once and afterwards only changes through
    :meth:`execute`.
    """

    __slots__ = ("foundations", "columns", "hand")

    def __init__(self, cards: Sequence[Card]) -> None:
        if len(cards) < DECK_SIZE:
            raise ValueError(f"dealing requires {DECK_SIZE} cards, got {len(cards)}")
        dealt = list(cards[:DECK_SIZE])
        if len(set(dealt)) != DECK_SIZE:
            raise ValueError("deck contains duplicate cards")

        self.foundations: tuple[Foundation, ...] = tuple(Foundation(suit) for suit in Suit)

        position = 0
        columns: list[Column] = []
        for height in range(1, NUM_COLUMNS + 1):
            columns.append(Column(dealt[position : position + height]))
            position += height
        self.columns: tuple[Column, ...] = tuple(columns)

        self.hand: tuple[SpotInHand, ...] = tuple(
            SpotInHand(dealt[position + idx]) for idx in range(NUM_SPOTS_IN_HAND)
        )
        logger.info("dealt %d columns and %d hand cells", NUM_COLUMNS, NUM_SPOTS_IN_HAND)

    @classmethod
    def empty(cls) -> "Board":
        """Return a board with every location empty."""

        board = cls.__new__(cls)
        board.foundations = tuple(Foundation(suit) for suit in Suit)
        board.columns = tuple(Column() for _ in range(NUM_COLUMNS))
        board.hand = tuple(SpotInHand() for _ in range(NUM_SPOTS_IN_HAND))
        return board

    def location_at(self, label: str) -> Location:
        kind, index = resolve_label(label)
        if kind is LocationKind.FOUNDATION:
            return self.foundations[index]
        if kind is LocationKind.COLUMN:
            return self.columns[index]
        return self.hand[index]

    def permits(self, movement: Movement) -> bool:
        """Return ``True`` when ``movement`` is legal on the current board."""

        origin = self.location_at(movement.origin)
        destination = self.location_at(movement.destination)
        card = origin.active_card()
        if card is None:
            return False
        return origin.can_give_card() and destination.can_receive(card)

    def execute(self, movement: Movement) -> Card:
        """Move the origin's active card onto the destination.

        The movement must be permitted; otherwise :class:`IllegalMove` is
        raised and the board is left untouched. Returns the moved card.
        """

        if not self.permits(movement):
            raise IllegalMove(f"movement {movement} is not permitted")
        card = self.location_at(movement.origin).give_card()
        self.location_at(movement.destination).receive(card)
        logger.debug("moved %s along %s", card.code, movement)
        return card

    def permitted_moves(self) -> list[Movement]:
        """Return every legal movement, in label order."""

        moves: list[Movement] = []
        for origin_label in ORIGIN_LABELS:
            origin = self.location_at(origin_label)
            card = origin.active_card()
            if card is None or not origin.can_give_card():
                continue
            for destination_label in DESTINATION_LABELS:
                if self.location_at(destination_label).can_receive(card):
                    moves.append(Movement(origin_label, destination_label))
        return moves

    def victory_state(self) -> VictoryState:
        if all(foundation.top_rank == MAX_RANK for foundation in self.foundations):
            return VictoryState.WON
        return VictoryState.ONGOING

    def cards(self) -> list[Card]:
        """Return every card on the board, foundations first."""

        found: list[Card] = []
        for foundation in self.foundations:
            found.extend(foundation.cards())
        for column in self.columns:
            found.extend(column.cards)
        found.extend(spot.card for spot in self.hand if spot.card is not None)
        return found

    def card_count(self) -> int:
        return len(self.cards())

    def locations(self) -> Iterable[tuple[str, Location]]:
        """Yield ``(label, location)`` pairs for all twenty locations."""

        for label in ALL_LABELS:
            yield label, self.location_at(label)
