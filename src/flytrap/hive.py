from __future__ import annotations

import logging
from typing import Optional

from .config import FlytrapConfig
from .rng import DeterministicRng
from .sim.core.brain import Flytrap
from .sim.core.signals import PopulationSignals

logger = logging.getLogger(__name__)


class Hive:
    """Shared context for one population of flytraps.

    Owns the signal counters and the random stream that every spawned
    critter reads and writes.
    """

    def __init__(self, config: Optional[FlytrapConfig] = None):
        self.config = config or FlytrapConfig()
        self.signals = PopulationSignals()
        self.rng = DeterministicRng(self.config.seed)
        self.spawned = 0
        logger.debug("hive created (seed=%d, initial phase=%s)", self.config.seed, self.config.colony.initial_phase.value)

    def spawn(self) -> Flytrap:
        self.spawned += 1
        return Flytrap(self.config, self.signals, self.rng)

    def reset(self) -> None:
        self.signals.reset()
        self.rng.reset()
        self.spawned = 0
        logger.debug("hive reset")
