"""Benchmark result for a single command."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from cmdbench.benchmark.measurement import Measurement, Measurements
from cmdbench.benchmark.quantity import Byte, Second
from cmdbench.errors import EmptySampleSetError


@dataclass(frozen=True)
class BenchmarkResult:
    """All runs of one benchmarked command."""

    command: str
    measurements: Measurements
    parameters: Dict[str, str] = field(default_factory=dict)

    def ensure_measured(self) -> None:
        """Raise EmptySampleSetError if no run was recorded."""
        if self.measurements.is_empty():
            raise EmptySampleSetError(self.command)

    @property
    def mean_wall_clock_time(self) -> float:
        """Mean wall-clock time in seconds."""
        self.ensure_measured()
        return self.measurements.wall_clock.mean

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkResult":
        """Create a BenchmarkResult from its JSON representation.

        Args:
            data: Dictionary with at least ``command`` and ``times`` (seconds).
                ``user``, ``system``, ``memory_usage_byte`` and ``exit_codes``
                are optional per-run lists aligned with ``times``.

        Returns:
            BenchmarkResult instance
        """
        times = data.get("times") or []
        n_runs = len(times)

        def per_run(key: str, default: Any) -> list:
            values = data.get(key)
            if values is None:
                return [default] * n_runs
            if len(values) != n_runs:
                raise ValueError(
                    f"'{key}' has {len(values)} entries but 'times' has {n_runs} "
                    f"for command '{data.get('command', '')}'"
                )
            return list(values)

        users = per_run("user", 0.0)
        systems = per_run("system", 0.0)
        memory = per_run("memory_usage_byte", 0)
        exit_codes = per_run("exit_codes", 0)

        measurements = Measurements(
            Measurement(
                time_wall_clock=Second(float(wall)),
                time_user=Second(float(user)),
                time_system=Second(float(system)),
                peak_memory_usage=Byte(int(mem)),
                exit_code=code,
            )
            for wall, user, system, mem, code in zip(times, users, systems, memory, exit_codes)
        )

        parameters = {str(k): str(v) for k, v in (data.get("parameters") or {}).items()}

        return cls(
            command=str(data["command"]),
            measurements=measurements,
            parameters=parameters,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization (times in seconds)."""
        self.ensure_measured()
        wall_clock = self.measurements.wall_clock

        return {
            "command": self.command,
            "mean": wall_clock.mean,
            "stddev": wall_clock.stddev,
            "median": wall_clock.median,
            "user": self.measurements.user.mean,
            "system": self.measurements.system.mean,
            "min": wall_clock.min,
            "max": wall_clock.max,
            "times": self.measurements.wall_clock_times,
            "memory_usage_byte": self.measurements.memory_usage_bytes,
            "exit_codes": self.measurements.exit_codes,
            "parameters": dict(self.parameters),
        }
