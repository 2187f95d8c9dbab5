"""Typer entry-point wiring for the patience CLI."""

from __future__ import annotations

import logging
from typing import Callable

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from textual.logging import TextualHandler

from ..board import Board, Movement
from ..deck import Deck
from ..session import GameConfig, GameSession, InputError, validate_destination, validate_origin
from .render import format_card, render_board
from .textual import run_textual_app

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
ORIGIN_PROMPT = "\nEnter position to move FROM (labelled e-t): "
DESTINATION_PROMPT = "\nEnter position to move TO (labelled a-m): "

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(verbose: bool, handler: logging.Handler | None = None) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[handler or RichHandler(console=console, show_path=False)],
            force=True,
        )
    else:
        logging.basicConfig(level=logging.WARNING, force=True)


def _resolve_config(seed: int | None, no_clear: bool) -> GameConfig:
    config = GameConfig.from_env()
    if seed is not None:
        config.seed = seed
    if no_clear:
        config.clear_screen = False
    return config


def _show_board(board: Board, config: GameConfig) -> None:
    prefix = CLEAR_SCREEN if config.clear_screen else ""
    # Plain output keeps the fixed-width grid intact.
    console.print(f"{prefix}\n{render_board(board)}", markup=False, highlight=False, end="")


def _prompt_label(prompt: str, validate: Callable[[str], str]) -> str:
    while True:
        raw = console.input(prompt)
        try:
            return validate(raw)
        except InputError as exc:
            console.print(str(exc))


def _moves_table(board: Board, moves: list[Movement], *, title: str) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("From", justify="center")
    table.add_column("To", justify="center")
    table.add_column("Card", justify="center")
    for movement in moves:
        card = board.location_at(movement.origin).active_card()
        table.add_row(movement.origin, movement.destination, format_card(card) if card else "—")
    return table


def run_loop(session: GameSession) -> bool:
    """Drive ``session`` from the terminal. Returns ``True`` when won."""

    _show_board(session.board, session.config)
    while not session.is_won:
        origin = _prompt_label(ORIGIN_PROMPT, validate_origin)
        destination = _prompt_label(DESTINATION_PROMPT, validate_destination)
        outcome = session.attempt(origin, destination)
        if outcome.accepted:
            _show_board(session.board, session.config)
        else:
            console.print(outcome.message)
    console.print(f"[bold green]You won in {session.moves_made} moves![/bold green]")
    return True


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deal (omit for randomness)."),
    no_clear: bool = typer.Option(False, "--no-clear", help="Do not clear the screen between moves."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity."),
) -> None:
    """Play in the terminal, two labels per turn."""

    _configure_logging(verbose)
    session = GameSession(_resolve_config(seed, no_clear))
    try:
        run_loop(session)
    except (EOFError, KeyboardInterrupt):
        console.print("\nGoodbye.")
        raise typer.Exit(code=0) from None


@app.command()
def tui(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deal (omit for randomness)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity."),
) -> None:
    """Play in the full-screen Textual interface."""

    # Textual owns the terminal; records go to its devtools log instead.
    _configure_logging(verbose, TextualHandler())
    run_textual_app(_resolve_config(seed, no_clear=True))


@app.command()
def show(
    seed: int | None = typer.Option(None, help="Random seed for the deal."),
) -> None:
    """Print a freshly dealt board and exit."""

    deck = Deck(seed)
    console.print(render_board(Board(deck)), markup=False, highlight=False, end="")


@app.command()
def hint(
    seed: int | None = typer.Option(None, help="Random seed for the deal."),
) -> None:
    """List the legal moves available on a freshly dealt board."""

    board = Board(Deck(seed))
    moves = board.permitted_moves()
    console.print(render_board(board), markup=False, highlight=False, end="")
    if not moves:
        console.print("[yellow]No legal moves.[/yellow]")
        return
    console.print(_moves_table(board, moves, title="Legal Moves"))


def main() -> None:
    """Entry-point for ``python -m patience.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
