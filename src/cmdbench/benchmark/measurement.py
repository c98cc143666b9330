"""Per-run measurements and their aggregate statistics."""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterable, Iterator, List, Optional, Tuple

from cmdbench.benchmark.quantity import Byte, Second
from cmdbench.eval.statistics import SampleStatistics, describe


@dataclass(frozen=True)
class Measurement:
    """Raw facts recorded for one completed run of a command."""

    time_wall_clock: Second
    time_user: Second = field(default_factory=Second.zero)
    time_system: Second = field(default_factory=Second.zero)
    peak_memory_usage: Byte = field(default_factory=Byte.zero)
    exit_code: Optional[int] = 0  # None when the process was killed by a signal


class Measurements:
    """Ordered, immutable sequence of measurements for one command.

    Statistics are derived from the sequence on first access and cached. The
    sequence itself cannot change, so the cached values never go stale.
    """

    def __init__(self, measurements: Iterable[Measurement] = ()):
        self._measurements: Tuple[Measurement, ...] = tuple(measurements)

    def __len__(self) -> int:
        return len(self._measurements)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._measurements)

    def __getitem__(self, index: int) -> Measurement:
        return self._measurements[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Measurements):
            return NotImplemented
        return self._measurements == other._measurements

    def __hash__(self) -> int:
        return hash(self._measurements)

    def __repr__(self) -> str:
        return f"Measurements({list(self._measurements)!r})"

    def is_empty(self) -> bool:
        return not self._measurements

    @property
    def wall_clock_times(self) -> List[float]:
        """Wall-clock times in seconds, in run order."""
        return [m.time_wall_clock.value for m in self._measurements]

    @property
    def user_times(self) -> List[float]:
        return [m.time_user.value for m in self._measurements]

    @property
    def system_times(self) -> List[float]:
        return [m.time_system.value for m in self._measurements]

    @property
    def memory_usage_bytes(self) -> List[int]:
        return [m.peak_memory_usage.value for m in self._measurements]

    @property
    def exit_codes(self) -> List[Optional[int]]:
        return [m.exit_code for m in self._measurements]

    @cached_property
    def wall_clock(self) -> SampleStatistics:
        return describe(self.wall_clock_times)

    @cached_property
    def user(self) -> SampleStatistics:
        return describe(self.user_times)

    @cached_property
    def system(self) -> SampleStatistics:
        return describe(self.system_times)

    @cached_property
    def memory(self) -> SampleStatistics:
        return describe(self.memory_usage_bytes)
