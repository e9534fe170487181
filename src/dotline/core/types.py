"""Point and Line value objects plus grid helpers.

Coordinates are integer lattice positions; ``x`` grows to the right and
``y`` grows downward, matching how the board is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass

# The eight compass directions around a point (3x3 neighbourhood minus centre).
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable grid point."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def neighbours(self) -> list[Point]:
        """All eight adjacent points, in- or out-of-bounds."""
        return [self.offset(dx, dy) for dx, dy in NEIGHBOUR_OFFSETS]

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Line:
    """Directed segment from ``start`` to ``end``."""

    start: Point
    end: Point

    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    @property
    def has_valid_shape(self) -> bool:
        """Nonzero length and horizontal, vertical or 45° diagonal."""
        size_x = abs(self.dx)
        size_y = abs(self.dy)
        if size_x == 0 and size_y == 0:
            return False
        return size_x == 0 or size_y == 0 or size_x == size_y

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"


def in_bounds(point: Point, width: int, height: int) -> bool:
    """Whether *point* lies on a ``width`` x ``height`` grid."""
    return 0 <= point.x < width and 0 <= point.y < height
