from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .types import Direction


class Phase(str, Enum):
    CLUMPING = "Clumping"
    SEARCHING = "Searching"
    GROUPING = "Grouping"
    MIGRATING = "Migrating"


@dataclass(slots=True)
class ColorPulse:
    scale: float
    direction: int = 1


@dataclass(slots=True)
class AgentState:
    phase: Phase
    migrate_dir: Direction
    pulse: ColorPulse
    commit_dir: Direction = Direction.EAST
    commit_timer: int = 0
    just_born: bool = True
