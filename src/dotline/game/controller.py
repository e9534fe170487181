"""GameController — the turn state machine of a line game session.

Coordinates: GameState, PathValidator, TurnTimer.
Emits events via simple callbacks so the transport / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dotline.core.enums import NodeStatus, Player
from dotline.core.types import Line, Point
from dotline.core.validator import PathValidator
from dotline.game.interfaces import GamePhase, IGameController, ITurnTimer
from dotline.game.state import GameState, MoveResponse, StateUpdate
from dotline.game.text import heading_for, idle_message, message_for

_LOGGER = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT_MS = 10_000

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResponse], None]
GameOverCallback = Callable[[Player], None]  # winner
PhaseCallback = Callable[[GamePhase], None]
UpdateCallback = Callable[[StateUpdate], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_reset: list[UpdateCallback] = field(default_factory=list)
    on_idle: list[UpdateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates submitted points, grows the path, and tracks turns.

    Every call is expected on one thread (the Qt main thread). The turn
    timer fires on the same event loop, so a timeout can never interleave
    with move processing.
    """

    __slots__ = (
        "_width",
        "_height",
        "_state",
        "_timer",
        "_idle_timeout_ms",
        "events",
    )

    def __init__(
        self,
        width: int,
        height: int,
        *,
        timer: ITurnTimer | None = None,
        idle_timeout_ms: int = DEFAULT_IDLE_TIMEOUT_MS,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        if timer is None:
            from dotline.game.timer import TurnTimer

            timer = TurnTimer()

        self._width = width
        self._height = height
        self._state = GameState()
        self._timer = timer
        self._idle_timeout_ms = idle_timeout_ms
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def grid_size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def timer(self) -> ITurnTimer:
        return self._timer

    @property
    def player(self) -> Player:
        return self._state.player

    @property
    def validator(self) -> PathValidator:
        return PathValidator(self._state.path, self._width, self._height)

    # ── IGameController impl ─────────────────────────────────────────────

    def reset_game(self, notify: bool) -> None:
        self._state.reset()
        self._restart_timer()
        _LOGGER.info("New game on a %dx%d grid", self._width, self._height)
        self._emit_phase(GamePhase.AWAITING_START)

        if notify:
            update = self.state_update(NodeStatus.VALID_END_NODE)
            for cb in self.events.on_reset:
                cb(update)

    def add_move(self, point: Point) -> MoveResponse:
        state = self._state
        if state.is_game_over:
            return MoveResponse(NodeStatus.GAME_OVER)

        validator = self.validator

        if state.pending_start is None:
            if validator.point_is_valid(point, True):
                state.select_start(point)
                response = MoveResponse(NodeStatus.VALID_START_NODE)
            else:
                response = MoveResponse(NodeStatus.INVALID_START_NODE)
        else:
            line = Line(state.pending_start, point)
            if validator.point_is_valid(point, False) and validator.line_is_valid(line):
                state.commit(line)
                if validator.is_final_move(point):
                    return self._finish(line)
                response = MoveResponse(NodeStatus.VALID_END_NODE, line)
            else:
                state.clear_start()
                response = MoveResponse(NodeStatus.INVALID_END_NODE)

        _LOGGER.debug("Point %s -> %s", point, response.status)
        self._restart_timer()
        self._emit_move(response)
        self._emit_phase(state.phase)
        return response

    # ── Display helpers ──────────────────────────────────────────────────

    def heading(self, status: NodeStatus | None) -> str:
        return heading_for(status, self._state.player)

    def message(self, status: NodeStatus | None) -> str | None:
        return message_for(status, self._state.player)

    def state_update(
        self, status: NodeStatus | None, new_line: Line | None = None
    ) -> StateUpdate:
        """Heading and message a client shows after *status*."""
        return StateUpdate(
            new_line=new_line,
            heading=self.heading(status),
            message=self.message(status),
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, line: Line) -> MoveResponse:
        self._state.finish()
        self._timer.cancel()
        winner = self._state.player
        _LOGGER.info(
            "Game over after %d lines, player %s wins", self._state.line_count, winner
        )

        response = MoveResponse(NodeStatus.GAME_OVER, line)
        self._emit_move(response)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)
        return response

    def _restart_timer(self) -> None:
        self._timer.arm(self._idle_timeout_ms, self._on_idle_timeout)

    def _on_idle_timeout(self) -> None:
        if self._state.is_game_over:
            return
        _LOGGER.info(
            "Player %s idle for %d ms", self._state.player, self._idle_timeout_ms
        )
        update = StateUpdate(
            new_line=None,
            heading=self.heading(None),
            message=idle_message(),
        )
        for cb in self.events.on_idle:
            cb(update)

    def _emit_move(self, response: MoveResponse) -> None:
        for cb in self.events.on_move:
            cb(response)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
