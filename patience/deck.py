"""Deck assembly and shuffling."""

from __future__ import annotations

from typing import Iterator, Sequence, overload

import numpy as np

from .cards import Card, iter_full_deck

DECK_SIZE = 52


class Deck(Sequence[Card]):
    """A shuffled, read-only ordering of the 52 distinct cards.

    Cards are retrieved by position (``deal``/indexing) or sequentially by
    iteration; the deck itself never changes once built.
    """

    __slots__ = ("_cards", "seed")

    def __init__(self, seed: int | None = None, *, shuffle: bool = True) -> None:
        cards = list(iter_full_deck())
        if shuffle:
            rng = np.random.default_rng(seed)
            order = rng.permutation(len(cards))
            cards = [cards[int(idx)] for idx in order]
        self._cards: tuple[Card, ...] = tuple(cards)
        self.seed = seed

    @classmethod
    def ordered(cls) -> "Deck":
        """Return an unshuffled deck in suit-then-rank order."""

        return cls(shuffle=False)

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "Deck":
        """Wrap a prepared ordering, checking it is a complete deck."""

        if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
            raise ValueError("a deck must contain all 52 distinct cards exactly once")
        deck = cls(shuffle=False)
        deck._cards = tuple(cards)
        return deck

    def deal(self, index: int) -> Card:
        """Return the card at ``index`` without removing it."""

        if not 0 <= index < len(self._cards):
            raise IndexError(f"deck index {index} out of range")
        return self._cards[index]

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Card]: ...

    def __getitem__(self, index):
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
