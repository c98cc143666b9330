"""Shared helpers for building benchmark results."""

import pytest

from cmdbench.benchmark import BenchmarkResult, Byte, Measurement, Measurements, Second


def make_result(command, times, parameters=None):
    """Benchmark result whose user time equals wall-clock time, as in a sleep."""
    return BenchmarkResult(
        command=command,
        measurements=Measurements(
            Measurement(
                time_wall_clock=Second(t),
                time_user=Second(t),
                time_system=Second.zero(),
                peak_memory_usage=Byte(1024),
                exit_code=0,
            )
            for t in times
        ),
        parameters=parameters or {},
    )


@pytest.fixture
def results_auto_ms():
    return [
        make_result("sleep 0.1", [0.09, 0.10, 0.14]),
        make_result("sleep 2", [2.0, 3.0, 4.0]),
    ]


@pytest.fixture
def results_auto_s():
    return [
        make_result("sleep 2", [2.1, 2.2, 2.3]),
        make_result("sleep 0.1", [0.1, 0.2, 0.3]),
    ]


@pytest.fixture
def results_tight():
    return [
        make_result("sleep 2", [2.01, 2.02, 2.03]),
        make_result("sleep 0.1", [0.11, 0.12, 0.13]),
    ]
