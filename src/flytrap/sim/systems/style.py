from __future__ import annotations

from pygame import Color

from ...config import StyleConfig
from ..core.agent import AgentState, ColorPulse


def new_pulse(style: StyleConfig) -> ColorPulse:
    return ColorPulse(scale=style.scale_max)


def advance_pulse(pulse: ColorPulse, style: StyleConfig) -> None:
    """Step the brightness multiplier, bouncing between ``scale_min`` and ``scale_max``."""
    pulse.scale += pulse.direction * style.change_per_frame
    if style.scale_min > pulse.scale or pulse.scale > style.scale_max:
        pulse.direction *= -1
    pulse.scale = min(style.scale_max, max(style.scale_min, pulse.scale))


def display_color(state: AgentState, style: StyleConfig) -> Color:
    if state.just_born:
        return Color(*style.newborn_color)
    scale = state.pulse.scale
    return Color(*(int(min(255, scale * channel)) for channel in style.base_color))


def display_glyph(state: AgentState, style: StyleConfig) -> str:
    return style.newborn_glyph if state.just_born else style.glyph
