"""Tests for GameState."""

from dotline.core.enums import Player
from dotline.core.types import Line, Point
from dotline.game.interfaces import GamePhase
from dotline.game.state import GameState


class TestGameStateSetup:
    def test_initial(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.AWAITING_START
        assert gs.pending_start is None
        assert gs.path.is_empty
        assert gs.player == Player.ONE

    def test_reset_replaces_everything(self) -> None:
        gs = GameState()
        gs.select_start(Point(0, 0))
        gs.commit(Line(Point(0, 0), Point(1, 1)))
        gs.finish()
        old_path = gs.path
        gs.reset()
        assert gs.path is not old_path
        assert gs.path.is_empty
        assert gs.phase == GamePhase.AWAITING_START
        assert not gs.is_game_over


class TestGameStateTransitions:
    def test_select_start(self) -> None:
        gs = GameState()
        gs.select_start(Point(2, 2))
        assert gs.pending_start == Point(2, 2)
        assert gs.phase == GamePhase.AWAITING_END

    def test_clear_start(self) -> None:
        gs = GameState()
        gs.select_start(Point(2, 2))
        gs.clear_start()
        assert gs.pending_start is None
        assert gs.phase == GamePhase.AWAITING_START

    def test_commit(self) -> None:
        gs = GameState()
        gs.select_start(Point(0, 0))
        gs.commit(Line(Point(0, 0), Point(1, 1)))
        assert gs.path.points() == [Point(0, 0), Point(1, 1)]
        assert gs.pending_start is None
        assert gs.phase == GamePhase.AWAITING_START
        assert gs.line_count == 1

    def test_finish(self) -> None:
        gs = GameState()
        gs.finish()
        assert gs.is_game_over


class TestPlayerAlternation:
    def test_player_follows_line_count(self) -> None:
        gs = GameState()
        points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0), Point(3, 1)]
        assert gs.player == Player.ONE
        for k, (a, b) in enumerate(zip(points, points[1:]), start=1):
            gs.commit(Line(a, b))
            expected = Player.ONE if k % 2 == 0 else Player.TWO
            assert gs.line_count == k
            assert gs.player == expected
