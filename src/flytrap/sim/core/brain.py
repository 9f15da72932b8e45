from __future__ import annotations

from typing import Optional

from pygame import Color

from ...config import FlytrapConfig
from ...rng import DeterministicRng
from ..systems import strategy, style, tactics
from .agent import AgentState, Phase
from .signals import PopulationSignals
from .types import Action, Observation


class Flytrap:
    """Decision core for one critter.

    Every critter of a population must be handed the same ``signals`` so that
    migration timing is coordinated across the colony.
    """

    def __init__(
        self,
        config: FlytrapConfig,
        signals: PopulationSignals,
        rng: DeterministicRng,
        state: Optional[AgentState] = None,
    ):
        self.config = config
        self.signals = signals
        self.rng = rng
        self.state = state or AgentState(
            phase=config.colony.initial_phase,
            migrate_dir=config.colony.initial_migrate_dir,
            pulse=style.new_pulse(config.style),
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def decide(self, info: Observation) -> Action:
        self.state.just_born = False
        style.advance_pulse(self.state.pulse, self.config.style)

        action = tactics.react(self, info)
        if action is not None:
            return action
        return strategy.HANDLERS[self.state.phase](self, info)

    @property
    def color(self) -> Color:
        return style.display_color(self.state, self.config.style)

    @property
    def glyph(self) -> str:
        return style.display_glyph(self.state, self.config.style)

    def display_state(self) -> tuple[Color, str]:
        return self.color, self.glyph

    def __str__(self) -> str:
        return self.glyph
