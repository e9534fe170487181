"""Qt bridge between a client's request/response ports and the game."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dotline.game.controller import GameController
from dotline.game.state import StateUpdate
from dotline.game.timer import TurnTimer
from dotline.server.protocol import (
    MessageType,
    ProtocolError,
    Request,
    decode_request,
    encode_update,
    point_from_body,
)
from dotline.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class GameServer(QObject):
    """Owns one game session and speaks the envelope protocol.

    Requests arrive through :meth:`receive_message`; every outbound
    envelope (move outcomes, resets, idle nudges) is emitted on
    :attr:`response`.
    """

    response = pyqtSignal(object)

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or GameSettings()
        if controller is None:
            controller = GameController(
                self._settings.grid_width,
                self._settings.grid_height,
                timer=TurnTimer(self),
                idle_timeout_ms=self._settings.idle_timeout_ms,
            )
        self._controller = controller
        self._controller.events.on_reset.append(self._on_reset)
        self._controller.events.on_idle.append(self._on_idle)
        self._is_started = False

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def start(self) -> None:
        """Begin the first game and announce it to the client."""
        if self._is_started:
            return
        self._is_started = True
        self._controller.reset_game(notify=True)

    # ── Inbound ──────────────────────────────────────────────────────────

    @pyqtSlot(str)
    def receive_message(self, message: str) -> None:
        """Decode a JSON request and dispatch it."""
        try:
            request = decode_request(message)
        except ProtocolError as exc:
            _LOGGER.warning("Dropping malformed request: %s", exc)
            return
        self.handle_request(request)

    def handle_request(self, request: Request) -> None:
        if request.msg == MessageType.INITIALIZE:
            self._controller.reset_game(notify=False)

        elif request.msg == MessageType.NODE_CLICKED:
            try:
                point = point_from_body(request.body)
            except ProtocolError as exc:
                _LOGGER.warning("Dropping NODE_CLICKED: %s", exc)
                return
            result = self._controller.add_move(point)
            update = self._controller.state_update(result.status, result.new_line)
            self.response.emit(encode_update(result.status, update))

        elif request.msg == MessageType.ERROR:
            _LOGGER.error("Client reported an error: %s", request.body)

        else:
            _LOGGER.warning("Ignoring unknown request type %r", request.msg)

    # ── Outbound ─────────────────────────────────────────────────────────

    def _on_reset(self, update: StateUpdate) -> None:
        self.response.emit(encode_update(MessageType.INITIALIZE, update))

    def _on_idle(self, update: StateUpdate) -> None:
        self.response.emit(encode_update(MessageType.UPDATE_TEXT, update))
