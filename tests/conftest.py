from __future__ import annotations

from typing import Iterable

import pytest

from patience.board import Board
from patience.cards import Card, Suit, card_from_code


def _cards(codes: str) -> list[Card]:
    return [card_from_code(code) for code in codes.split()]


def build_board(
    *,
    columns: Iterable[str] = (),
    hand: Iterable[str | None] = (),
    foundations: Iterable[int | None] = (),
) -> Board:
    """Return an otherwise empty board with the given locations filled."""

    board = Board.empty()
    for column, codes in zip(board.columns, columns):
        for card in _cards(codes):
            column.receive(card)
    for spot, code in zip(board.hand, hand):
        if code is not None:
            spot.receive(card_from_code(code))
    for foundation, top_rank in zip(board.foundations, foundations):
        foundation.top_rank = top_rank
    return board


@pytest.fixture
def ace_of_spades() -> Card:
    return Card(Suit.SPADES, 1)


@pytest.fixture
def make_board():
    return build_board
