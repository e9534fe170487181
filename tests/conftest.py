"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class FakeTimer:
    """In-memory turn timer; tests trigger expiry with :meth:`fire`."""

    def __init__(self) -> None:
        self.arm_count = 0
        self.cancel_count = 0
        self.duration_ms: int | None = None
        self._callback: Callable[[], None] | None = None
        self.last_callback: Callable[[], None] | None = None

    def arm(self, duration_ms: int, callback: Callable[[], None]) -> None:
        self.arm_count += 1
        self.duration_ms = duration_ms
        self._callback = callback
        self.last_callback = callback

    def cancel(self) -> None:
        self.cancel_count += 1
        self._callback = None

    @property
    def is_active(self) -> bool:
        return self._callback is not None

    def fire(self) -> None:
        callback, self._callback = self._callback, None
        assert callback is not None, "timer is not armed"
        callback()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for event-loop tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared text locale between tests."""
    from dotline.game.text import set_language

    set_language("English")
    yield
    set_language("English")
