from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from ..core.types import Action, Neighbor, Observation
from ..utils.geometry import closest_neighbor, optimal_turn

if TYPE_CHECKING:
    from ..core.brain import Flytrap


def react(brain: Flytrap, info: Observation) -> Optional[Action]:
    """Immediate responses to enemies; ``None`` hands the tick to the strategy layer."""
    state = brain.state

    # Never pass up an infection directly ahead
    if info.front == Neighbor.OTHER:
        state.commit_dir = info.direction
        state.commit_timer = brain.config.tactics.commit_timer_init
        return Action.INFECT

    # Hop away from an enemy behind rather than turning twice
    if info.back == Neighbor.OTHER and info.front == Neighbor.EMPTY:
        return Action.HOP

    # Turn toward enemies at the sides or back
    closest_enemy = closest_neighbor(info, Neighbor.OTHER, brain.rng)
    if closest_enemy is not None:
        return optimal_turn(info, closest_enemy)

    # Keep facing the last infection for a few ticks
    if state.commit_timer > 0:
        state.commit_timer -= 1
        return optimal_turn(info, state.commit_dir)

    return None
