"""Textual-powered interactive patience interface."""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ...board import ALL_LABELS, Board, Movement
from ...session import GameConfig, GameSession, InputError, validate_destination, validate_origin
from ..render import format_card, render_board_panel

MAX_EVENT_LINES = 18


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def set_lines(self, lines: Sequence[str]) -> None:
        self.lines = tuple(lines[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text(line))
        else:
            content.add_row(Text.from_markup("[dim]Moves will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class InfoPanel(Static):
    """Reusable wrapper that expects ``update_panel`` calls with Rich renderables."""

    def update_panel(self, title: str, body) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


def hint_lines(board: Board, moves: Sequence[Movement]) -> list[str]:
    """Describe each legal movement as Rich markup."""

    lines = []
    for movement in moves:
        card = board.location_at(movement.origin).active_card()
        label = format_card(card) if card is not None else "?"
        lines.append(f"[bold]{movement.origin}[/bold] → [bold]{movement.destination}[/bold]  {label}")
    return lines


class PatienceTextualApp(App):
    """Full-screen board; type an origin label, then a destination label."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #left {
        width: 3fr;
        padding: 0 1;
    }

    #right {
        width: 2fr;
        padding: 0 1;
        overflow-y: auto;
    }

    InfoPanel, EventLog {
        width: 100%;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("escape", "cancel", "Cancel origin"),
        Binding("question_mark", "toggle_hints", "Hints"),
        Binding("ctrl+n", "new_game", "New game"),
    ]

    def __init__(self, config: GameConfig | None = None) -> None:
        super().__init__()
        self.config = config or GameConfig(clear_screen=False)
        self.session = GameSession(self.config)
        self.pending_origin: str | None = None
        self.hints_enabled = False
        self.status_message = ""

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.board_panel: InfoPanel | None = None
        self.hint_panel: InfoPanel | None = None
        self.event_log: EventLog | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.board_panel = InfoPanel(id="board")
        self.hint_panel = InfoPanel(id="hints")
        self.event_log = EventLog(id="events")

        yield Horizontal(
            Vertical(self.board_panel, id="left"),
            Vertical(self.hint_panel, self.event_log, id="right"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh_ui()

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        character = event.character
        if character and character.lower() in ALL_LABELS:
            event.stop()
            self.handle_label(character)

    def action_cancel(self) -> None:
        self.pending_origin = None
        self._set_status("")

    def action_toggle_hints(self) -> None:
        self.hints_enabled = not self.hints_enabled
        self._refresh_ui()

    def action_new_game(self) -> None:
        self.session = GameSession(self.config)
        self.pending_origin = None
        self._refresh_ui()
        self._set_status("[cyan]New game dealt[/cyan]")

    def handle_label(self, raw: str) -> None:
        """Feed one typed label into the origin/destination state machine."""

        if self.session.is_won:
            return
        try:
            if self.pending_origin is None:
                self.pending_origin = validate_origin(raw)
                card = self.session.board.location_at(self.pending_origin).active_card()
                shown = format_card(card) if card is not None else "[dim]empty[/dim]"
                self._set_status(f"From [bold]{self.pending_origin}[/bold] {shown} — choose a-m")
                return
            validate_destination(raw)
        except InputError as exc:
            self._set_status(f"[red]{exc}[/red]")
            return

        outcome = self.session.attempt(self.pending_origin, raw)
        self.pending_origin = None
        if outcome.accepted:
            self._set_status(f"[green]{outcome.message}[/green]")
        else:
            self._set_status(f"[red]{outcome.message}[/red]")
        self._refresh_ui()
        if self.session.is_won:
            self._set_status(
                f"[bold green]You won in {self.session.moves_made} moves![/bold green] Ctrl+N deals again."
            )

    def _refresh_ui(self) -> None:
        board = self.session.board
        if self.board_panel:
            self.board_panel.update(render_board_panel(board))
        if self.hint_panel:
            if self.hints_enabled:
                lines = hint_lines(board, self.session.hint()) or ["[yellow]No legal moves[/yellow]"]
                body = Text.from_markup("\n".join(lines))
            else:
                body = Text.from_markup("[dim]Press ? to show legal moves[/dim]")
            self.hint_panel.update_panel("Hints", body)
        if self.event_log:
            self.event_log.set_lines(self.session.events)
        seed = self.session.seed
        self.title = f"Patience • Moves {self.session.moves_made}" + (f" • Seed {seed}" if seed is not None else "")

    def _set_status(self, message: str) -> None:
        self.status_message = message
        if self.status_strip:
            self.status_strip.message = message


def run_textual_app(config: GameConfig) -> None:
    """Launch the Textual UI."""

    app = PatienceTextualApp(config)
    app.run()
