from __future__ import annotations

from patience.board import Board
from patience.cards import Card, Suit
from patience.cli.render import format_card, render_board, render_board_panel
from patience.deck import Deck


def test_empty_board_layout(make_board) -> None:
    lines = render_board(make_board()).split("\n")

    assert lines == [
        "                           a    b    c    d",
        "_" * 44,
        " " * 26 + "  ♠    ♡    ♢    ♣",
        "",
        "",
        "  e    f    g    h    i    j    k    l    m",
        "_" * 44,
        " " * 43,
        "",
        "  n    o    p    q    r    s    t",
        "_" * 44,
        " " * 35,
        "",
    ]


def test_dealt_board_rows() -> None:
    lines = render_board(Board(Deck.ordered())).split("\n")

    column_rows = lines[7:17]
    assert column_rows[0] == " A♠   2♠   4♠   7♠   J♠   3♡   9♡   3♢   J♢"
    assert column_rows[8].strip() == "6♣"
    assert column_rows[9] == " " * 43
    assert lines[20] == " 7♣   8♣   9♣  10♣   J♣   Q♣   K♣  "
    assert len(lines) == 22


def test_foundation_shows_top_card(make_board) -> None:
    lines = render_board(make_board(foundations=[None, 12])).split("\n")
    assert lines[2] == " " * 26 + "  ♠   Q♡    ♢    ♣"


def test_format_card_colours_red_suits() -> None:
    assert format_card(Card(Suit.HEARTS, 1)) == "[red] A♡[/red]"
    assert format_card(Card(Suit.CLUBS, 10)) == "[white]10♣[/white]"


def test_render_board_panel_wraps_grid(make_board) -> None:
    panel = render_board_panel(make_board(), title="Test")
    assert panel.title == "Test"
