"""Descriptive statistics over per-run samples.

Only simple descriptive statistics are computed here: mean, sample standard
deviation, median and extrema. Sample cleaning (warmup, outliers) happens
before results reach this package.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from cmdbench.errors import EmptySampleSetError


@dataclass(frozen=True)
class SampleStatistics:
    """Summary of one tracked quantity across all runs."""
    mean: float
    stddev: float
    median: float
    min: float
    max: float
    n_samples: int


def describe(values: Sequence[float]) -> SampleStatistics:
    """Reduce an ordered sequence of samples to its descriptive statistics.

    The standard deviation is the sample standard deviation (n - 1 in the
    denominator). A single sample has no defined spread and reports 0.0.

    Args:
        values: Samples of one quantity, in run order

    Returns:
        SampleStatistics for the samples

    Raises:
        EmptySampleSetError: if ``values`` is empty
    """
    data = np.asarray(values, dtype=np.float64)

    if data.size == 0:
        raise EmptySampleSetError()

    lo = float(np.min(data))
    hi = float(np.max(data))

    if lo == hi:
        # Constant samples: skip the summation round-off entirely
        mean, stddev = lo, 0.0
    else:
        mean = float(np.clip(np.mean(data), lo, hi))
        stddev = float(np.std(data, ddof=1)) if data.size > 1 else 0.0

    return SampleStatistics(
        mean=mean,
        stddev=stddev,
        median=float(np.median(data)),
        min=lo,
        max=hi,
        n_samples=int(data.size),
    )
