"""Driver-side game flow: input validation, move attempts and the event log."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .board import (
    DESTINATION_LABELS,
    ORIGIN_LABELS,
    Board,
    Movement,
    VictoryState,
)
from .cards import Card
from .deck import Deck

__all__ = [
    "InputError",
    "GameConfig",
    "MoveOutcome",
    "GameSession",
    "validate_origin",
    "validate_destination",
]

logger = logging.getLogger(__name__)

REJECTED_MESSAGE = "That move is not permitted, try again!"


class InputError(ValueError):
    """Raised when raw player input is not an acceptable label."""


@dataclass(slots=True)
class GameConfig:
    """Runtime options for a single game."""

    seed: int | None = None
    clear_screen: bool = True
    max_event_log: int = 12

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Read defaults from ``PATIENCE_SEED`` and ``PATIENCE_NO_CLEAR``."""

        raw_seed = os.environ.get("PATIENCE_SEED")
        seed = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"PATIENCE_SEED must be an integer, got {raw_seed!r}") from None
        no_clear = os.environ.get("PATIENCE_NO_CLEAR", "").lower() in {"1", "true", "yes"}
        return cls(seed=seed, clear_screen=not no_clear)


def _validate(raw: str, allowed: str) -> str:
    label = raw.strip().lower()
    if len(label) != 1 or label not in allowed:
        raise InputError(f"You must enter a letter from {allowed[0]} to {allowed[-1]}")
    return label


def validate_origin(raw: str) -> str:
    """Return the origin label in ``raw`` or raise :class:`InputError`."""

    return _validate(raw, ORIGIN_LABELS)


def validate_destination(raw: str) -> str:
    """Return the destination label in ``raw`` or raise :class:`InputError`."""

    return _validate(raw, DESTINATION_LABELS)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a single move attempt."""

    movement: Movement
    accepted: bool
    card: Card | None = None
    message: str = ""


@dataclass(slots=True)
class GameSession:
    """One dealt game plus the bookkeeping a driver needs around it."""

    config: GameConfig = field(default_factory=GameConfig)
    board: Board | None = None
    deck: Deck | None = field(init=False, default=None)
    moves_made: int = field(init=False, default=0)
    events: list[str] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        # A board passed in was prepared elsewhere and has no deck.
        if self.board is None:
            self.deck = Deck(self.config.seed)
            self.board = Board(self.deck)
            logger.info("new game dealt (seed=%s)", self.config.seed)

    @property
    def seed(self) -> int | None:
        """Seed of the dealt deck, or ``None`` for a prepared board."""

        return self.deck.seed if self.deck is not None else None

    @classmethod
    def from_board(cls, board: Board, config: GameConfig | None = None) -> "GameSession":
        """Wrap an already prepared board."""

        return cls(config or GameConfig(), board=board)

    def _log_event(self, message: str) -> None:
        self.events.append(message)
        excess = len(self.events) - self.config.max_event_log
        if excess > 0:
            del self.events[:excess]

    def attempt(self, origin: str, destination: str) -> MoveOutcome:
        """Validate raw labels and apply the move when the rules allow it.

        Raises :class:`InputError` for labels outside the driver ranges.
        """

        movement = Movement(validate_origin(origin), validate_destination(destination))
        if not self.board.permits(movement):
            self._log_event(f"{movement} rejected")
            return MoveOutcome(movement, accepted=False, message=REJECTED_MESSAGE)

        card = self.board.execute(movement)
        self.moves_made += 1
        self._log_event(f"{card.code} {movement}")
        if self.is_won:
            logger.info("game won after %d moves", self.moves_made)
            self._log_event("All foundations complete")
        return MoveOutcome(movement, accepted=True, card=card, message=f"Moved {card.code}")

    def hint(self) -> list[Movement]:
        return self.board.permitted_moves()

    @property
    def is_won(self) -> bool:
        return self.board.victory_state() is VictoryState.WON

    @property
    def is_stuck(self) -> bool:
        """``True`` when the game is not won and no move is available."""

        return not self.is_won and not self.board.permitted_moves()
