"""Tests for segment classification and overlap detection."""

from fractions import Fraction

from dotline.core.enums import IntersectType
from dotline.core.geometry import (
    classify,
    intersection_point,
    point_within_colinear_segment,
    segments_overlap,
)
from dotline.core.types import Line, Point


def _line(x1: int, y1: int, x2: int, y2: int) -> Line:
    return Line(Point(x1, y1), Point(x2, y2))


class TestClassify:
    def test_proper_crossing(self) -> None:
        a = _line(0, 0, 2, 2)
        b = _line(0, 2, 2, 0)
        assert classify(a, b) == IntersectType.INTERSECTING

    def test_diagonals_of_unit_square_cross(self) -> None:
        assert classify(_line(0, 0, 1, 1), _line(1, 0, 0, 1)) == IntersectType.INTERSECTING

    def test_shared_endpoint_counts_as_intersecting(self) -> None:
        assert classify(_line(0, 0, 1, 1), _line(1, 1, 2, 1)) == IntersectType.INTERSECTING

    def test_t_junction_touch(self) -> None:
        assert classify(_line(0, 1, 2, 1), _line(1, 0, 1, 1)) == IntersectType.INTERSECTING

    def test_colinear_overlapping(self) -> None:
        assert classify(_line(0, 0, 2, 0), _line(1, 0, 3, 0)) == IntersectType.COLINEAR

    def test_colinear_apart_is_still_colinear(self) -> None:
        assert classify(_line(0, 0, 1, 1), _line(2, 2, 3, 3)) == IntersectType.COLINEAR

    def test_parallel(self) -> None:
        kind = classify(_line(0, 0, 2, 0), _line(0, 1, 2, 1))
        assert kind == IntersectType.PARALLEL
        assert kind.is_disjoint

    def test_lines_meet_outside_segments(self) -> None:
        kind = classify(_line(0, 0, 1, 0), _line(3, -1, 3, 1))
        assert kind == IntersectType.NONE
        assert kind.is_disjoint

    def test_symmetric(self) -> None:
        a = _line(0, 0, 3, 3)
        b = _line(3, 0, 0, 3)
        assert classify(a, b) == classify(b, a)


class TestIntersectionPoint:
    def test_crossing_between_grid_points(self) -> None:
        point = intersection_point(_line(0, 0, 1, 1), _line(1, 0, 0, 1))
        assert point == (Fraction(1, 2), Fraction(1, 2))

    def test_none_for_parallel(self) -> None:
        assert intersection_point(_line(0, 0, 2, 0), _line(0, 1, 2, 1)) is None


class TestPointWithinColinearSegment:
    def test_endpoints_inclusive(self) -> None:
        assert point_within_colinear_segment(Point(0, 0), Point(0, 0), Point(2, 2))
        assert point_within_colinear_segment(Point(2, 2), Point(0, 0), Point(2, 2))

    def test_interior(self) -> None:
        assert point_within_colinear_segment(Point(1, 1), Point(2, 2), Point(0, 0))

    def test_beyond_extent(self) -> None:
        assert not point_within_colinear_segment(Point(3, 3), Point(0, 0), Point(2, 2))

    def test_vertical_segment_uses_y_extent(self) -> None:
        assert point_within_colinear_segment(Point(1, 2), Point(1, 0), Point(1, 3))
        assert not point_within_colinear_segment(Point(1, 4), Point(1, 0), Point(1, 3))

    def test_off_line(self) -> None:
        assert not point_within_colinear_segment(Point(1, 0), Point(0, 0), Point(2, 2))


class TestSegmentsOverlap:
    def test_crossing_overlaps(self) -> None:
        assert segments_overlap(_line(0, 0, 2, 2), _line(0, 2, 2, 0))

    def test_touching_endpoint_overlaps(self) -> None:
        assert segments_overlap(_line(0, 0, 1, 0), _line(1, 0, 1, 1))

    def test_colinear_partial_overlap(self) -> None:
        assert segments_overlap(_line(0, 0, 2, 0), _line(1, 0, 3, 0))

    def test_colinear_containment(self) -> None:
        assert segments_overlap(_line(0, 0, 3, 0), _line(1, 0, 2, 0))
        assert segments_overlap(_line(1, 0, 2, 0), _line(0, 0, 3, 0))

    def test_colinear_touching_end_to_end(self) -> None:
        assert segments_overlap(_line(0, 0, 1, 0), _line(1, 0, 2, 0))

    def test_colinear_disjoint(self) -> None:
        assert not segments_overlap(_line(0, 0, 1, 0), _line(2, 0, 3, 0))

    def test_parallel_never_overlaps(self) -> None:
        assert not segments_overlap(_line(0, 0, 2, 0), _line(0, 1, 2, 1))
