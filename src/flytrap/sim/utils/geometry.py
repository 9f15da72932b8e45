from __future__ import annotations

from typing import Optional

from ...rng import DeterministicRng
from ..core.types import Action, Direction, GridDirection, Neighbor, Observation

_TO_GRID = {
    Direction.NORTH: GridDirection.UP,
    Direction.EAST: GridDirection.RIGHT,
    Direction.SOUTH: GridDirection.DOWN,
    Direction.WEST: GridDirection.LEFT,
}
_TO_CARDINAL = {grid: cardinal for cardinal, grid in _TO_GRID.items()}

_FRONT = 0
_RIGHT = 1
_BACK = 2
_LEFT = 3


def to_grid(direction: Direction) -> GridDirection:
    return _TO_GRID[direction]


def to_cardinal(direction: GridDirection) -> Direction:
    return _TO_CARDINAL[direction]


def shift_dir(direction: GridDirection, shift: int) -> GridDirection:
    """Rotate ``direction`` clockwise by ``shift`` steps; negative is counter-clockwise."""
    return GridDirection((int(direction) + shift) % 4)


def rotate(direction: Direction, shift: int) -> Direction:
    return to_cardinal(shift_dir(to_grid(direction), shift))


def relative_offset(info: Observation, target: Direction) -> int:
    """Clockwise steps from the current facing to ``target`` (0..3)."""
    return (to_grid(target) - to_grid(info.direction)) % 4


def optimal_turn(info: Observation, target: Direction) -> Action:
    """Cheapest turn toward ``target``.

    Already facing ``target`` yields INFECT. A target directly behind costs
    two turns either way and always resolves to LEFT.
    """
    if info.direction == target:
        return Action.INFECT
    clockwise = relative_offset(info, target)
    counter_clockwise = 4 - clockwise
    return Action.RIGHT if clockwise < counter_clockwise else Action.LEFT


def closest_neighbor(info: Observation, neighbor: Neighbor, rng: DeterministicRng) -> Optional[Direction]:
    """Absolute direction of the nearest cell holding ``neighbor``.

    Checks front, then the sides (a coin flip when both match), then back.
    """
    offset: Optional[int] = None
    if info.front == neighbor:
        offset = _FRONT
    elif info.left == neighbor and info.right == neighbor:
        offset = _RIGHT if rng.next_float() > 0.5 else _LEFT
    elif info.left == neighbor:
        offset = _LEFT
    elif info.right == neighbor:
        offset = _RIGHT
    elif info.back == neighbor:
        offset = _BACK
    if offset is None:
        return None
    return rotate(info.direction, offset)


def direction_of(info: Observation, target: Direction) -> Optional[Direction]:
    """Facing of the same-kind neighbor that sits in absolute direction ``target``."""
    return info.neighbor_direction(relative_offset(info, target))
