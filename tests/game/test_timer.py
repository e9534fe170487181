"""Tests for the QTimer-backed TurnTimer."""

from PyQt6.QtTest import QTest

from dotline.game.timer import TurnTimer


class TestTurnTimer:
    def test_not_active_initially(self, qapp) -> None:
        timer = TurnTimer()
        assert not timer.is_active

    def test_fires_once(self, qapp) -> None:
        fired: list[int] = []
        timer = TurnTimer()
        timer.arm(20, lambda: fired.append(1))
        assert timer.is_active
        assert timer.duration_ms == 20
        QTest.qWait(150)
        assert fired == [1]
        assert not timer.is_active

    def test_cancel_prevents_expiry(self, qapp) -> None:
        fired: list[int] = []
        timer = TurnTimer()
        timer.arm(20, lambda: fired.append(1))
        timer.cancel()
        QTest.qWait(100)
        assert fired == []
        assert not timer.is_active

    def test_rearm_replaces_pending_countdown(self, qapp) -> None:
        fired: list[str] = []
        timer = TurnTimer()
        timer.arm(20, lambda: fired.append("first"))
        timer.arm(40, lambda: fired.append("second"))
        QTest.qWait(200)
        assert fired == ["second"]
