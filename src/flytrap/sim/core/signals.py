from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SignalCounter:
    """Scalar shared by every critter of a population.

    Reads and writes are deliberately unsynchronized; each critter adds or
    removes its share in engine order and compares against a threshold on
    its own.
    """

    value: int = 0

    def promote(self, amount: int) -> int:
        self.value += amount
        return self.value

    def inhibit(self, amount: int) -> int:
        self.value = max(self.value - amount, 0)
        return self.value

    def reset(self) -> None:
        self.value = 0


@dataclass(slots=True)
class PopulationSignals:
    migration: SignalCounter = field(default_factory=SignalCounter)
    clumping: SignalCounter = field(default_factory=SignalCounter)

    def reset(self) -> None:
        self.migration.reset()
        self.clumping.reset()
