"""Idle countdown for the player to move, backed by a single-shot QTimer."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from dotline.game.interfaces import ITurnTimer


class TurnTimer(ITurnTimer):
    """Re-armable single-shot countdown.

    The timer fires on the thread that owns it, so expiry is serialised
    with move handling on the same event loop.
    """

    __slots__ = ("_timer", "_callback")

    def __init__(self, parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self._callback: Callable[[], None] | None = None

    def arm(self, duration_ms: int, callback: Callable[[], None]) -> None:
        self._timer.stop()
        self._callback = callback
        self._timer.start(duration_ms)

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def duration_ms(self) -> int:
        return self._timer.interval()

    def _on_timeout(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
