"""Speed of each benchmark result relative to the fastest one.

The uncertainty of a ratio of two noisy means is propagated to first order:

    sigma_r = r * sqrt((sigma_i / mean_i)^2 + (sigma_b / mean_b)^2)

This assumes the two means have independent, small relative errors. For very
noisy or heavy-tailed run-time distributions it may understate the spread.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from cmdbench.benchmark.result import BenchmarkResult
from cmdbench.errors import EmptySampleSetError, UndefinedRatioError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelativeSpeed:
    """Ratio of a result's mean to the baseline mean."""
    ratio: float
    ratio_stddev: float
    is_baseline: bool


def fastest_index(results: Sequence[BenchmarkResult]) -> int:
    """Index of the result with the smallest mean wall-clock time.

    Ties go to the earliest result in input order.
    """
    if not results:
        raise EmptySampleSetError()

    best = 0
    best_mean = results[0].mean_wall_clock_time
    for i, result in enumerate(results[1:], start=1):
        mean = result.mean_wall_clock_time
        if mean < best_mean:
            best, best_mean = i, mean
    return best


def compute_relative_speed(results: Sequence[BenchmarkResult]) -> List[RelativeSpeed]:
    """Compute the relative speed of every result against the fastest one.

    Must be given the full, unsorted result set; the returned list is aligned
    with the input.

    Args:
        results: Benchmark results in original input order

    Returns:
        One RelativeSpeed per result, exactly one of them the baseline

    Raises:
        EmptySampleSetError: if ``results`` or any result's measurements is empty
        UndefinedRatioError: if any mean wall-clock time is zero
    """
    for result in results:
        if result.mean_wall_clock_time == 0.0:
            raise UndefinedRatioError(result.command)

    baseline_index = fastest_index(results)
    baseline = results[baseline_index].measurements.wall_clock
    logger.debug(f"Baseline is '{results[baseline_index].command}' ({baseline.mean}s)")

    speeds = []
    for i, result in enumerate(results):
        if i == baseline_index:
            speeds.append(RelativeSpeed(ratio=1.0, ratio_stddev=0.0, is_baseline=True))
            continue

        stats = result.measurements.wall_clock
        ratio = stats.mean / baseline.mean
        ratio_stddev = ratio * math.sqrt(
            (stats.stddev / stats.mean) ** 2 + (baseline.stddev / baseline.mean) ** 2
        )
        speeds.append(RelativeSpeed(ratio=ratio, ratio_stddev=ratio_stddev, is_baseline=False))

    return speeds
