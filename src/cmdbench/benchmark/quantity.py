"""Typed time and memory quantities."""

import math
from dataclasses import dataclass

from cmdbench.units import Unit


@dataclass(frozen=True, order=True)
class Second:
    """A non-negative duration, stored in seconds."""

    value: float

    def __post_init__(self):
        if not math.isfinite(self.value) or self.value < 0:
            raise ValueError(f"Durations must be finite and non-negative, got {self.value}")

    @classmethod
    def zero(cls) -> "Second":
        return cls(0.0)

    def in_unit(self, unit: Unit) -> float:
        """Magnitude of this duration expressed in ``unit``."""
        return self.value * unit.factor


@dataclass(frozen=True, order=True)
class Byte:
    """A non-negative memory amount, stored in bytes."""

    value: int

    def __post_init__(self):
        if not math.isfinite(self.value) or self.value < 0:
            raise ValueError(f"Byte counts must be finite and non-negative, got {self.value}")

    @classmethod
    def zero(cls) -> "Byte":
        return cls(0)
