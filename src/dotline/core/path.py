"""Double-ended polyline of visited grid points."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from dotline.core.types import Line, Point


class Path:
    """Ordered vertices of every line drawn so far.

    Consecutive points form the drawn lines. The path is either empty or
    holds at least two points, and only ever grows at its two free ends.
    """

    __slots__ = ("_points",)

    def __init__(self, points: list[Point] | None = None) -> None:
        self._points: deque[Point] = deque(points or ())
        if len(self._points) == 1:
            raise ValueError("A path needs zero or at least two points")

    # ── Queries ──────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"Path([{', '.join(str(p) for p in self._points)}])"

    @property
    def is_empty(self) -> bool:
        return not self._points

    @property
    def front(self) -> Point | None:
        return self._points[0] if self._points else None

    @property
    def back(self) -> Point | None:
        return self._points[-1] if self._points else None

    @property
    def line_count(self) -> int:
        """Number of drawn lines."""
        return max(0, len(self._points) - 1)

    def is_free_end(self, point: Point) -> bool:
        return bool(self._points) and point in (self._points[0], self._points[-1])

    def segments(self) -> Iterator[tuple[int, Line]]:
        """Yield ``(i, Line(path[i-1], path[i]))`` for every drawn line."""
        prev: Point | None = None
        for i, point in enumerate(self._points):
            if prev is not None:
                yield i, Line(prev, point)
            prev = point

    def points(self) -> list[Point]:
        return list(self._points)

    # ── Mutation ─────────────────────────────────────────────────────────

    def extend(self, line: Line) -> None:
        """Attach *line* at the free end it starts from.

        On an empty path the line becomes the whole path. The caller is
        responsible for the legality check.
        """
        if not self._points:
            self._points.append(line.start)
            self._points.append(line.end)
        elif line.start == self._points[0]:
            self._points.appendleft(line.end)
        elif line.start == self._points[-1]:
            self._points.append(line.end)
        else:
            raise ValueError(f"Line {line} does not start at a free end of {self!r}")

    def clear(self) -> None:
        self._points.clear()
