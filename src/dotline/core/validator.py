"""Legality checks for points and lines against the current path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dotline.core.enums import IntersectType
from dotline.core.geometry import (
    classify,
    point_within_colinear_segment,
    segments_overlap,
)
from dotline.core.types import Line, Point, in_bounds

if TYPE_CHECKING:
    from dotline.core.path import Path


class PathValidator:
    """Decides whether a point or line is a legal move on a given path.

    The validator reads the path but never mutates it.
    """

    __slots__ = ("_path", "_width", "_height")

    def __init__(self, path: Path, width: int, height: int) -> None:
        self._path = path
        self._width = width
        self._height = height

    @property
    def grid_size(self) -> tuple[int, int]:
        return self._width, self._height

    # ── Points ───────────────────────────────────────────────────────────

    def point_is_valid(self, point: Point, is_candidate_start: bool) -> bool:
        """In-bounds check; a new line must also start at a free end."""
        if is_candidate_start and not self._path.is_empty:
            if not self._path.is_free_end(point):
                return False
        return in_bounds(point, self._width, self._height)

    # ── Lines ────────────────────────────────────────────────────────────

    def line_is_valid(self, line: Line) -> bool:
        if not line.has_valid_shape:
            return False

        path = self._path
        last = len(path) - 1
        for i, segment in path.segments():
            if i == 1 and line.start == segment.start:
                # Extending from the front: may touch, not fold back
                if _folds_onto(line, segment, far_end=segment.end):
                    return False
            elif i == last and line.start == segment.end:
                # Extending from the back
                if _folds_onto(line, segment, far_end=segment.start):
                    return False
            elif segments_overlap(line, segment):
                return False

        return True

    # ── End of game ──────────────────────────────────────────────────────

    def legal_continuations(self, point: Point) -> list[Point]:
        """Neighbours of *point* reachable by a legal unit-length line."""
        return [
            n
            for n in point.neighbours()
            if self.point_is_valid(n, False) and self.line_is_valid(Line(point, n))
        ]

    def is_final_move(self, point: Point) -> bool:
        """True when no line can continue from *point*.

        Any legal line from *point* passes through one of its eight
        neighbours, and the unit line to that neighbour is blocked only by
        something that blocks every longer line on the same ray, so the
        neighbourhood check is exact.
        """
        return not self.legal_continuations(point)


def _folds_onto(line: Line, adjacent: Line, *, far_end: Point) -> bool:
    """Whether *line* doubles back over the segment it continues from."""
    if classify(line, adjacent) != IntersectType.COLINEAR:
        return False
    return point_within_colinear_segment(
        line.end, adjacent.start, adjacent.end
    ) or point_within_colinear_segment(far_end, line.start, line.end)
