"""Segment relationship tests on integer coordinates.

All arithmetic is exact: parameters of the intersection are compared as
integer ratios, so touching endpoints are never lost to rounding.
"""

from __future__ import annotations

from fractions import Fraction

from dotline.core.enums import IntersectType
from dotline.core.types import Line, Point


def _solve(line_a: Line, line_b: Line) -> tuple[int, int, int]:
    """Return ``(denom, nume_a, nume_b)`` for the two parametric lines."""
    x1, y1 = line_a.start.x, line_a.start.y
    x2, y2 = line_a.end.x, line_a.end.y
    x3, y3 = line_b.start.x, line_b.start.y
    x4, y4 = line_b.end.x, line_b.end.y

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    nume_a = (x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)
    nume_b = (x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)
    return denom, nume_a, nume_b


def classify(line_a: Line, line_b: Line) -> IntersectType:
    """Classify how two segments relate.

    Segments that meet at any point, endpoints included, are
    ``INTERSECTING`` unless they lie on the same infinite line, in which
    case they are ``COLINEAR`` regardless of whether their extents overlap.
    """
    denom, nume_a, nume_b = _solve(line_a, line_b)

    if denom == 0:
        if nume_a == 0 and nume_b == 0:
            return IntersectType.COLINEAR
        return IntersectType.PARALLEL

    if denom < 0:
        denom, nume_a, nume_b = -denom, -nume_a, -nume_b

    # 0 <= ua <= 1 and 0 <= ub <= 1 with ua = nume_a / denom, ub = nume_b / denom
    if 0 <= nume_a <= denom and 0 <= nume_b <= denom:
        return IntersectType.INTERSECTING
    return IntersectType.NONE


def intersection_point(line_a: Line, line_b: Line) -> tuple[Fraction, Fraction] | None:
    """Exact crossing point of two ``INTERSECTING`` segments, else ``None``."""
    if classify(line_a, line_b) != IntersectType.INTERSECTING:
        return None
    denom, nume_a, _ = _solve(line_a, line_b)
    ua = Fraction(nume_a, denom)
    return (
        line_a.start.x + ua * line_a.dx,
        line_a.start.y + ua * line_a.dy,
    )


def point_within_colinear_segment(point: Point, seg_start: Point, seg_end: Point) -> bool:
    """Whether *point* lies on the segment ``seg_start``–``seg_end``.

    The point must sit on the infinite line through the segment and within
    its extent, endpoints inclusive.
    """
    cross = (seg_end.x - seg_start.x) * (point.y - seg_start.y) - (
        seg_end.y - seg_start.y
    ) * (point.x - seg_start.x)
    if cross != 0:
        return False

    if seg_start.x != seg_end.x:
        lo, hi = sorted((seg_start.x, seg_end.x))
        return lo <= point.x <= hi
    lo, hi = sorted((seg_start.y, seg_end.y))
    return lo <= point.y <= hi


def segments_overlap(line_a: Line, line_b: Line) -> bool:
    """Whether two segments cross, touch, or share colinear extent."""
    kind = classify(line_a, line_b)

    if kind == IntersectType.INTERSECTING:
        return True

    if kind == IntersectType.COLINEAR:
        return (
            point_within_colinear_segment(line_a.start, line_b.start, line_b.end)
            or point_within_colinear_segment(line_a.end, line_b.start, line_b.end)
            or point_within_colinear_segment(line_b.start, line_a.start, line_a.end)
            or point_within_colinear_segment(line_b.end, line_a.start, line_a.end)
        )

    return False
