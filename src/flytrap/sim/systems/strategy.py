from __future__ import annotations

import logging
from typing import Callable, Dict, TYPE_CHECKING

from ..core.agent import Phase
from ..core.types import Action, Direction, Neighbor, Observation
from ..utils.geometry import closest_neighbor, direction_of, optimal_turn, rotate

if TYPE_CHECKING:
    from ..core.brain import Flytrap

logger = logging.getLogger(__name__)


def _enter(brain: Flytrap, phase: Phase) -> None:
    logger.debug(
        "critter %s -> %s (migration signal %d)",
        brain.state.phase.value,
        phase.value,
        brain.signals.migration.value,
    )
    brain.state.phase = phase


def _align(info: Observation, friend: Direction) -> Action:
    # Without a reported facing, turn toward the friend itself
    facing = direction_of(info, friend)
    return optimal_turn(info, facing if facing is not None else friend)


def clump(brain: Flytrap, info: Observation) -> Action:
    """Opening sweep toward one heading so early critters pile up together.

    Lasts until the population has collectively spent ``clump_threshold``
    ticks clumping, after which every critter falls through to searching.
    """
    colony = brain.config.colony
    if brain.signals.clumping.promote(colony.clump_speed) >= colony.clump_threshold:
        _enter(brain, Phase.SEARCHING)
        return search(brain, info)

    if info.direction != colony.clump_heading:
        return optimal_turn(info, colony.clump_heading)
    return Action.RIGHT if info.front == Neighbor.WALL else Action.HOP


def search(brain: Flytrap, info: Observation) -> Action:
    """Wander until a friend is adjacent, then start grouping with it."""
    closest_friend = closest_neighbor(info, Neighbor.SAME, brain.rng)
    if closest_friend is not None:
        _enter(brain, Phase.GROUPING)
        return _align(info, closest_friend)

    # Turning right on walls sweeps the edges clockwise
    return Action.RIGHT if info.front == Neighbor.WALL else Action.HOP


def group(brain: Flytrap, info: Observation) -> Action:
    """Hold a colony together, covering open cells.

    Every grouped critter feeds the migration signal; whoever pushes it past
    the threshold while next to an open cell leaves to found a new colony.
    """
    colony = brain.config.colony
    closest_friend = closest_neighbor(info, Neighbor.SAME, brain.rng)
    closest_empty = closest_neighbor(info, Neighbor.EMPTY, brain.rng)

    if brain.signals.migration.promote(colony.migrate_promote) >= colony.migrate_threshold and closest_empty is not None:
        _enter(brain, Phase.MIGRATING)
        brain.state.migrate_dir = rotate(brain.state.migrate_dir, 1)
        return _march(brain, info)

    if closest_friend is None:
        _enter(brain, Phase.SEARCHING)
        return Action.HOP

    # Plug the gap
    if closest_empty is not None:
        return optimal_turn(info, closest_empty)

    return _align(info, closest_friend)


def migrate(brain: Flytrap, info: Observation) -> Action:
    """Travel toward ``migrate_dir`` until a new colony is reached.

    Migrating critters drain the migration signal so only a few leave at once.
    """
    colony = brain.config.colony
    state = brain.state
    brain.signals.migration.inhibit(colony.migrate_inhibit)

    # Random one-step jitter of the heading
    if brain.rng.next_float() < colony.migrate_turn_chance:
        state.migrate_dir = rotate(state.migrate_dir, brain.rng.sample_choice((1, -1)))

    if info.front == Neighbor.WALL:
        state.migrate_dir = rotate(state.migrate_dir, 1)

    return _march(brain, info)


def _march(brain: Flytrap, info: Observation) -> Action:
    heading = brain.state.migrate_dir
    if info.direction != heading:
        return optimal_turn(info, heading)
    if info.front == Neighbor.EMPTY:
        return Action.HOP

    closest_friend = closest_neighbor(info, Neighbor.SAME, brain.rng)
    if closest_friend is not None:
        _enter(brain, Phase.GROUPING)
        return _align(info, closest_friend)

    return Action.HOP


HANDLERS: Dict[Phase, Callable[["Flytrap", Observation], Action]] = {
    Phase.CLUMPING: clump,
    Phase.SEARCHING: search,
    Phase.GROUPING: group,
    Phase.MIGRATING: migrate,
}
