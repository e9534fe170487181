"""Game state — path, pending start and phase for one session."""

from __future__ import annotations

from dataclasses import dataclass, field

from dotline.core.enums import NodeStatus, Player
from dotline.core.path import Path
from dotline.core.types import Line, Point
from dotline.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class MoveResponse:
    """Outcome of :meth:`GameController.add_move`."""

    status: NodeStatus
    new_line: Line | None = None


@dataclass(frozen=True, slots=True)
class StateUpdate:
    """What a client should display after an interaction."""

    new_line: Line | None
    heading: str | None
    message: str | None


@dataclass
class GameState:
    """Mutable session data.

    This is a pure data/logic class: no timers, no Qt.
    """

    path: Path = field(default_factory=Path, init=False)
    pending_start: Point | None = field(default=None, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_START, init=False)

    def reset(self) -> None:
        self.path = Path()
        self.pending_start = None
        self.phase = GamePhase.AWAITING_START

    # ── Transitions ──────────────────────────────────────────────────────

    def select_start(self, point: Point) -> None:
        self.pending_start = point
        self.phase = GamePhase.AWAITING_END

    def clear_start(self) -> None:
        self.pending_start = None
        if self.phase == GamePhase.AWAITING_END:
            self.phase = GamePhase.AWAITING_START

    def commit(self, line: Line) -> None:
        """Add a validated line to the path and wait for the next start."""
        self.path.extend(line)
        self.clear_start()

    def finish(self) -> None:
        self.pending_start = None
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def line_count(self) -> int:
        return self.path.line_count

    @property
    def player(self) -> Player:
        """Player 1 on an empty or odd-length path, otherwise player 2."""
        n = len(self.path)
        return Player.ONE if n == 0 or n % 2 else Player.TWO
