"""Board locations: suit foundations, tableau columns and hand cells."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .cards import MAX_RANK, MIN_RANK, Card, Suit

__all__ = [
    "LocationContractError",
    "Location",
    "Foundation",
    "Column",
    "SpotInHand",
]


class LocationContractError(RuntimeError):
    """Raised when a card is taken from a location that has none to give."""


class Location(ABC):
    """Capability shared by every addressable spot on the board.

    The *active card* is the single card currently exposed, both for
    comparison when receiving and for removal when giving.
    """

    __slots__ = ()

    @abstractmethod
    def can_receive(self, card: Card) -> bool:
        """Return ``True`` when ``card`` may legally be placed here."""

    @abstractmethod
    def receive(self, card: Card) -> None:
        """Place ``card`` here without checking legality."""

    @abstractmethod
    def can_give_card(self) -> bool:
        """Gate controlling whether the active card may be removed."""

    @abstractmethod
    def give_card(self) -> Card:
        """Remove and return the active card."""

    @abstractmethod
    def active_card(self) -> Card | None:
        """Return the exposed card, or ``None`` when empty."""

    @property
    def is_empty(self) -> bool:
        return self.active_card() is None


class Foundation(Location):
    """Per-suit ascending pile, built from ace to king."""

    __slots__ = ("suit", "top_rank")

    def __init__(self, suit: Suit, top_rank: int | None = None) -> None:
        if top_rank is not None and not MIN_RANK <= top_rank <= MAX_RANK:
            raise ValueError(f"top rank must be within [{MIN_RANK}, {MAX_RANK}]")
        self.suit = suit
        self.top_rank = top_rank

    def next_rank(self) -> int:
        return (self.top_rank or 0) + 1

    @property
    def is_complete(self) -> bool:
        return self.top_rank == MAX_RANK

    def can_receive(self, card: Card) -> bool:
        return card.suit == self.suit and card.rank == self.next_rank()

    def receive(self, card: Card) -> None:
        self.top_rank = card.rank

    def can_give_card(self) -> bool:
        return False

    def give_card(self) -> Card:
        # Never reached through the board: the gate above is always closed.
        if self.top_rank is None:
            raise LocationContractError(f"{self.suit.name.lower()} foundation is empty")
        card = Card(self.suit, self.top_rank)
        self.top_rank = self.top_rank - 1 if self.top_rank > MIN_RANK else None
        return card

    def active_card(self) -> Card | None:
        if self.top_rank is None:
            return None
        return Card(self.suit, self.top_rank)

    def cards(self) -> list[Card]:
        """Return the whole pile, ace first."""

        return [Card(self.suit, rank) for rank in range(MIN_RANK, (self.top_rank or 0) + 1)]

    def __repr__(self) -> str:
        return f"Foundation(suit={self.suit.name}, top_rank={self.top_rank})"


class Column(Location):
    """Tableau pile; only its last card is ever touched."""

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def card_at(self, index: int) -> Card | None:
        """Return the card ``index`` places from the bottom, if present."""

        if 0 <= index < len(self._cards):
            return self._cards[index]
        return None

    def can_receive(self, card: Card) -> bool:
        active = self.active_card()
        if active is None:
            return True
        return active.color != card.color and active.rank == card.rank + 1

    def receive(self, card: Card) -> None:
        self._cards.append(card)

    def can_give_card(self) -> bool:
        return bool(self._cards)

    def give_card(self) -> Card:
        if not self._cards:
            raise LocationContractError("column is empty")
        return self._cards.pop()

    def active_card(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Column({' '.join(card.code for card in self._cards)})"


class SpotInHand(Location):
    """Single-card staging cell. It only ever gives cards away."""

    __slots__ = ("card",)

    def __init__(self, card: Card | None = None) -> None:
        self.card = card

    def can_receive(self, card: Card) -> bool:
        return False

    def receive(self, card: Card) -> None:
        self.card = card

    def can_give_card(self) -> bool:
        return self.card is not None

    def give_card(self) -> Card:
        if self.card is None:
            raise LocationContractError("hand cell is empty")
        card, self.card = self.card, None
        return card

    def active_card(self) -> Card | None:
        return self.card

    def __repr__(self) -> str:
        return f"SpotInHand({self.card.code if self.card else ''})"
