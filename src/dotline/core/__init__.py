"""Core domain layer — pure line-game logic with zero external dependencies.

Quick start::

    from dotline.core import Line, Path, PathValidator, Point

    path = Path()
    validator = PathValidator(path, 4, 4)
    line = Line(Point(0, 0), Point(1, 1))
    if validator.line_is_valid(line):
        path.extend(line)
"""

from dotline.core.enums import IntersectType, NodeStatus, Player
from dotline.core.geometry import (
    classify,
    intersection_point,
    point_within_colinear_segment,
    segments_overlap,
)
from dotline.core.path import Path
from dotline.core.types import NEIGHBOUR_OFFSETS, Line, Point, in_bounds
from dotline.core.validator import PathValidator

__all__ = [
    # Enums
    "IntersectType",
    "NodeStatus",
    "Player",
    # Types / helpers
    "NEIGHBOUR_OFFSETS",
    "Line",
    "Point",
    "in_bounds",
    # Geometry
    "classify",
    "intersection_point",
    "point_within_colinear_segment",
    "segments_overlap",
    # Domain objects
    "Path",
    "PathValidator",
]
