from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler
from textual.logging import TextualHandler
from typer.testing import CliRunner

import patience.cli.main as cli_main
from patience.board import Movement
from patience.cli.textual.app import hint_lines
from patience.session import GameConfig, GameSession

runner = CliRunner()


def test_cli_package_exposes_main_module() -> None:
    import patience.cli

    assert patience.cli.main is cli_main
    assert hasattr(cli_main, "app")


def test_show_prints_board() -> None:
    result = runner.invoke(cli_main.app, ["show", "--seed", "3"])

    assert result.exit_code == 0
    assert "a    b    c    d" in result.output
    assert "n    o    p    q    r    s    t" in result.output


def test_hint_lists_moves_or_reports_none() -> None:
    result = runner.invoke(cli_main.app, ["hint", "--seed", "3"])

    assert result.exit_code == 0
    assert "Legal Moves" in result.output or "No legal moves" in result.output


def test_play_reprompts_on_bad_label_and_exits_on_eof() -> None:
    result = runner.invoke(cli_main.app, ["play", "--seed", "1", "--no-clear"], input="u\n")

    assert result.exit_code == 0
    assert "You must enter a letter from e to t" in result.output
    assert "Goodbye." in result.output


def test_play_reports_rejected_and_winning_moves(monkeypatch: pytest.MonkeyPatch, make_board) -> None:
    def fake_session(config: GameConfig) -> GameSession:
        board = make_board(columns=["KH", "5S"], foundations=[13, 12, 13, 13])
        return GameSession.from_board(board, config)

    monkeypatch.setattr(cli_main, "GameSession", fake_session)
    result = runner.invoke(cli_main.app, ["play", "--no-clear"], input="f\na\ne\nb\n")

    assert result.exit_code == 0
    assert "That move is not permitted, try again!" in result.output
    assert "You won in 1 moves!" in result.output


def test_hint_lines_describe_each_move(make_board) -> None:
    board = make_board(columns=["AS"])
    lines = hint_lines(board, [Movement("e", "a")])
    assert len(lines) == 1
    assert "[bold]e[/bold] → [bold]a[/bold]" in lines[0]
    assert "A♠" in lines[0]


def test_tui_verbose_logs_to_textual_not_the_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[GameConfig] = []
    monkeypatch.setattr(cli_main, "run_textual_app", launched.append)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        result = runner.invoke(cli_main.app, ["tui", "--seed", "8", "--verbose"])
        handlers = root.handlers[:]
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert result.exit_code == 0
    assert launched[0].seed == 8
    assert any(isinstance(handler, TextualHandler) for handler in handlers)
    assert not any(isinstance(handler, RichHandler) for handler in handlers)
