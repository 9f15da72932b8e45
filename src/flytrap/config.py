from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .sim.core.agent import Phase
from .sim.core.types import Direction


@dataclass
class TacticsConfig:
    # Ticks spent facing the direction of the last infection
    commit_timer_init: int = 6

    def __post_init__(self) -> None:
        if self.commit_timer_init < 0:
            raise ValueError(f"commit_timer_init must be >= 0, got {self.commit_timer_init}")


@dataclass
class ColonyConfig:
    initial_phase: Phase = Phase.SEARCHING
    initial_migrate_dir: Direction = Direction.EAST
    clump_heading: Direction = Direction.WEST
    clump_threshold: int = 1000
    clump_speed: int = 1
    migrate_threshold: int = 18000
    migrate_promote: int = 1
    migrate_inhibit: int = 25
    migrate_turn_chance: float = 0.35

    def __post_init__(self) -> None:
        self.initial_phase = Phase(self.initial_phase)
        self.initial_migrate_dir = Direction(self.initial_migrate_dir)
        self.clump_heading = Direction(self.clump_heading)
        for name in ("clump_threshold", "clump_speed", "migrate_threshold", "migrate_promote", "migrate_inhibit"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if not 0.0 <= self.migrate_turn_chance <= 1.0:
            raise ValueError(f"migrate_turn_chance must be within [0, 1], got {self.migrate_turn_chance}")


@dataclass
class StyleConfig:
    scale_max: float = 2.75
    scale_min: float = 0.35
    change_per_frame: float = 0.10
    base_color: tuple[int, int, int] = (110, 75, 245)
    newborn_color: tuple[int, int, int] = (255, 255, 255)
    newborn_glyph: str = "⏺"
    glyph: str = "✿"


@dataclass
class FlytrapConfig:
    seed: int = 42
    tactics: TacticsConfig = field(default_factory=TacticsConfig)
    colony: ColonyConfig = field(default_factory=ColonyConfig)
    style: StyleConfig = field(default_factory=StyleConfig)

    @staticmethod
    def from_yaml(path: Path) -> "FlytrapConfig":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        return load_config(data or {})


def load_config(raw: dict) -> FlytrapConfig:
    default_style = StyleConfig()
    style_raw = raw.get("style", {})

    def _rgb(value: tuple[int, int, int] | list[int] | None, default: tuple[int, int, int]) -> tuple[int, int, int]:
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        return default

    tactics = TacticsConfig(**raw.get("tactics", {}))
    colony = ColonyConfig(**raw.get("colony", {}))
    style = StyleConfig(
        base_color=_rgb(style_raw.get("base_color"), default_style.base_color),
        newborn_color=_rgb(style_raw.get("newborn_color"), default_style.newborn_color),
        **{k: v for k, v in style_raw.items() if k not in {"base_color", "newborn_color"}},
    )
    top_values = {k: v for k, v in raw.items() if k not in {"tactics", "colony", "style"}}
    return FlytrapConfig(tactics=tactics, colony=colony, style=style, **top_values)
