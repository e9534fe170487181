"""Core enumerations for the line-drawing domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Player(IntEnum):
    """Participant number as shown to users."""

    ONE = 1
    TWO = 2

    def __str__(self) -> str:
        return str(self.value)


class IntersectType(IntEnum):
    """Relationship between two line segments."""

    NONE = 0
    PARALLEL = 1
    COLINEAR = 2
    INTERSECTING = 3

    @property
    def is_disjoint(self) -> bool:
        return self in (IntersectType.NONE, IntersectType.PARALLEL)


class NodeStatus(str, Enum):
    """Outcome of submitting a single point to the game."""

    VALID_START_NODE = "VALID_START_NODE"
    INVALID_START_NODE = "INVALID_START_NODE"
    VALID_END_NODE = "VALID_END_NODE"
    INVALID_END_NODE = "INVALID_END_NODE"
    GAME_OVER = "GAME_OVER"

    def __str__(self) -> str:
        return self.value
