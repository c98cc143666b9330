"""Benchmark data model."""

from cmdbench.benchmark.quantity import Byte, Second
from cmdbench.benchmark.measurement import Measurement, Measurements
from cmdbench.benchmark.result import BenchmarkResult

__all__ = [
    "Byte",
    "Second",
    "Measurement",
    "Measurements",
    "BenchmarkResult",
]
