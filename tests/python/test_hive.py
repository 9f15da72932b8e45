from __future__ import annotations

from flytrap.config import ColonyConfig, FlytrapConfig
from flytrap.hive import Hive
from flytrap.sim.core.agent import Phase
from flytrap.sim.core.types import Action, Direction, Neighbor, Observation


def test_spawned_critters_share_signals_and_rng():
    hive = Hive()
    first = hive.spawn()
    second = hive.spawn()

    assert first.signals is second.signals is hive.signals
    assert first.rng is second.rng is hive.rng
    assert first.state is not second.state
    assert hive.spawned == 2


def test_grouping_critters_feed_one_counter():
    hive = Hive()
    critters = [hive.spawn() for _ in range(3)]
    for critter in critters:
        critter.state.phase = Phase.GROUPING
    info = Observation(
        direction=Direction.NORTH,
        front=Neighbor.SAME,
        back=Neighbor.WALL,
        left=Neighbor.WALL,
        right=Neighbor.WALL,
        front_direction=Direction.NORTH,
    )

    for critter in critters:
        assert critter.decide(info) == Action.INFECT

    assert hive.signals.migration.value == 3


def test_separate_hives_do_not_interact():
    first = Hive()
    second = Hive()
    first.signals.migration.promote(10)

    assert second.signals.migration.value == 0


def test_hive_spawns_configured_initial_phase():
    hive = Hive(FlytrapConfig(colony=ColonyConfig(initial_phase=Phase.CLUMPING)))
    assert hive.spawn().phase == Phase.CLUMPING


def test_reset_clears_signals_and_replays_rng():
    hive = Hive(FlytrapConfig(seed=5))
    first_draws = [hive.rng.next_float() for _ in range(3)]
    hive.signals.migration.promote(7)
    hive.signals.clumping.promote(2)
    hive.spawn()

    hive.reset()

    assert hive.signals.migration.value == 0
    assert hive.signals.clumping.value == 0
    assert hive.spawned == 0
    assert [hive.rng.next_float() for _ in range(3)] == first_draws
