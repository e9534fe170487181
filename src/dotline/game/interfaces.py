"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on the Qt-backed timer, so the
state machine can be driven without an event loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotline.core.types import Point
    from dotline.game.state import MoveResponse


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    AWAITING_START = auto()
    AWAITING_END = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnTimer(ABC):
    """Cancellable single-shot countdown; at most one is ever pending."""

    @abstractmethod
    def arm(self, duration_ms: int, callback: Callable[[], None]) -> None:
        """Cancel any pending countdown, then start a new one."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop the pending countdown, if any."""

    @property
    @abstractmethod
    def is_active(self) -> bool: ...


class IGameController(ABC):
    """Interface for the session orchestrator."""

    @abstractmethod
    def reset_game(self, notify: bool) -> None:
        """Start over with an empty path."""

    @abstractmethod
    def add_move(self, point: Point) -> MoveResponse:
        """Submit one half of a move and report the outcome."""
