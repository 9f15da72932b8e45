from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Direction(str, Enum):
    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"


class GridDirection(IntEnum):
    """Clockwise ordinal directions, so turns can be done with arithmetic."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


class Neighbor(str, Enum):
    EMPTY = "Empty"
    WALL = "Wall"
    SAME = "Same"
    OTHER = "Other"


class Action(str, Enum):
    HOP = "Hop"
    LEFT = "Left"
    RIGHT = "Right"
    INFECT = "Infect"


@dataclass(frozen=True, slots=True)
class Observation:
    """What a critter sees on one tick.

    ``*_direction`` fields carry the facing of a same-kind neighbor in that
    cell and are ``None`` for any other occupant.
    """

    direction: Direction
    front: Neighbor = Neighbor.EMPTY
    back: Neighbor = Neighbor.EMPTY
    left: Neighbor = Neighbor.EMPTY
    right: Neighbor = Neighbor.EMPTY
    front_direction: Optional[Direction] = None
    back_direction: Optional[Direction] = None
    left_direction: Optional[Direction] = None
    right_direction: Optional[Direction] = None

    def neighbor(self, offset: int) -> Neighbor:
        """Occupant ``offset`` clockwise steps from the facing (0 is front)."""
        return (self.front, self.right, self.back, self.left)[offset % 4]

    def neighbor_direction(self, offset: int) -> Optional[Direction]:
        return (
            self.front_direction,
            self.right_direction,
            self.back_direction,
            self.left_direction,
        )[offset % 4]
