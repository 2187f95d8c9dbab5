"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from ..board import Board
from ..cards import Card, Color
from ..locations import Foundation, SpotInHand

BLANK_CELL = "   "
RULE = "_" * 44
CELL_GAP = "  "


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = "red" if card.color is Color.RED else "white"
    return f"[{color}]{card.label()}[/{color}]"


def _foundation_cell(foundation: Foundation) -> str:
    card = foundation.active_card()
    if card is None:
        return f"  {foundation.suit.symbol}"
    return card.label()


def _hand_cell(spot: SpotInHand) -> str:
    return spot.card.label() if spot.card is not None else BLANK_CELL


def render_board(board: Board) -> str:
    """Return the fixed-width text grid for ``board``."""

    lines = [
        "                           a    b    c    d",
        RULE,
        "                          " + CELL_GAP.join(_foundation_cell(f) for f in board.foundations),
        "",
        "",
        "  e    f    g    h    i    j    k    l    m",
        RULE,
    ]

    tallest = max(len(column) for column in board.columns)
    # One extra row past the tallest column leaves a blank spacer.
    for row in range(tallest + 1):
        cells = []
        for column in board.columns:
            card = column.card_at(row)
            cells.append(card.label() if card is not None else BLANK_CELL)
        lines.append(CELL_GAP.join(cells))

    lines.extend(
        [
            "",
            "  n    o    p    q    r    s    t",
            RULE,
            CELL_GAP.join(_hand_cell(spot) for spot in board.hand) + CELL_GAP,
        ]
    )
    return "\n".join(lines) + "\n"


def render_board_panel(board: Board, *, title: str = "Board") -> Panel:
    """Return a Rich panel wrapping the text grid, red suits highlighted."""

    text = Text(render_board(board))
    for symbol in ("♡", "♢"):
        text.highlight_words([symbol], style="red")
    return Panel(text, title=title, padding=(0, 1), border_style="cyan")
