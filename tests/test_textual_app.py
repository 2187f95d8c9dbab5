"""Origin/destination input handling of the Textual board, driven without a terminal."""

from __future__ import annotations

import pytest

from patience.cards import Card, Suit
from patience.cli.textual.app import PatienceTextualApp
from patience.session import GameConfig, GameSession


@pytest.fixture
def make_app(make_board):
    def _make(**layout) -> PatienceTextualApp:
        app = PatienceTextualApp(GameConfig(seed=5, clear_screen=False))
        app.session = GameSession.from_board(make_board(**layout), app.config)
        return app

    return _make


def test_origin_then_destination_moves_card(make_app) -> None:
    app = make_app(columns=["AS"])

    app.handle_label("e")
    assert app.pending_origin == "e"
    assert app.session.moves_made == 0

    app.handle_label("a")

    assert app.pending_origin is None
    assert app.session.moves_made == 1
    assert app.session.board.location_at("a").active_card() == Card(Suit.SPADES, 1)
    assert "Moved AS" in app.status_message


def test_invalid_origin_is_reported_and_not_kept(make_app) -> None:
    app = make_app(columns=["AS"])
    app.handle_label("b")
    assert app.pending_origin is None
    assert "from e to t" in app.status_message


def test_invalid_destination_keeps_pending_origin(make_app) -> None:
    app = make_app(columns=["AS"])
    app.handle_label("e")
    app.handle_label("n")

    assert app.pending_origin == "e"
    assert "from a to m" in app.status_message
    assert app.session.moves_made == 0

    app.handle_label("a")
    assert app.session.moves_made == 1


def test_rejected_move_clears_origin_and_leaves_board(make_app) -> None:
    app = make_app(columns=["2S"])
    app.handle_label("e")
    app.handle_label("a")

    assert app.pending_origin is None
    assert app.session.moves_made == 0
    assert app.session.board.columns[0].cards == (Card(Suit.SPADES, 2),)
    assert "not permitted" in app.status_message


def test_cancel_drops_pending_origin(make_app) -> None:
    app = make_app(columns=["AS"])
    app.handle_label("e")
    app.action_cancel()
    assert app.pending_origin is None


def test_input_ignored_after_win(make_app) -> None:
    app = make_app(columns=["KC", "QH"], foundations=[13, 13, 13, 12])
    app.handle_label("e")
    app.handle_label("d")
    assert app.session.is_won
    assert "You won in 1 moves" in app.status_message

    app.handle_label("f")
    app.handle_label("e")

    assert app.pending_origin is None
    assert app.session.moves_made == 1
    assert app.session.board.columns[1].cards == (Card(Suit.HEARTS, 12),)
