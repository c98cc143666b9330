"""Aggregate benchmark results into report rows."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from cmdbench.benchmark.quantity import Second
from cmdbench.benchmark.result import BenchmarkResult
from cmdbench.errors import EmptySampleSetError
from cmdbench.eval.relative_speed import RelativeSpeed, compute_relative_speed
from cmdbench.units import SortOrder, Unit, resolve_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportRow:
    """One table row; absolute times are in the report's resolved unit."""
    command: str
    mean: float
    stddev: float
    min: float
    max: float
    relative: RelativeSpeed


def load_results(results_file: Path) -> List[BenchmarkResult]:
    """Load benchmark results from a JSON file.

    The file holds either ``{"results": [...]}`` or a bare list of result
    entries, each in the shape accepted by ``BenchmarkResult.from_dict``.
    """
    with open(results_file, encoding="utf-8") as f:
        data = json.load(f)

    entries = data.get("results", []) if isinstance(data, dict) else data
    results = [BenchmarkResult.from_dict(entry) for entry in entries]

    logger.info(f"Loaded {len(results)} benchmark results from {results_file}")
    return results


def sort_rows(rows: Sequence[ReportRow], sort_order: SortOrder) -> List[ReportRow]:
    """Reorder rows for display. Values, unit and baseline are untouched."""
    if sort_order is SortOrder.MEAN_TIME:
        return sorted(rows, key=lambda row: row.mean)
    return list(rows)


def build_report_rows(
    results: Sequence[BenchmarkResult],
    unit: Optional[Unit] = None,
    sort_order: SortOrder = SortOrder.COMMAND,
) -> Tuple[List[ReportRow], Unit]:
    """Summarize results into display rows.

    Unit resolution and relative speeds are computed on the original input
    order; sorting is applied last.

    Args:
        results: Benchmark results in the order the commands were given
        unit: Explicit display unit, or None to resolve from the first result
        sort_order: Row presentation order

    Returns:
        Tuple of (rows, resolved unit)

    Raises:
        EmptySampleSetError: if there are no results or a result has no runs
        UndefinedRatioError: if a mean wall-clock time is zero
    """
    if not results:
        raise EmptySampleSetError()
    for result in results:
        result.ensure_measured()

    resolved = resolve_unit(unit, results[0].mean_wall_clock_time)
    speeds = compute_relative_speed(results)

    rows = []
    for result, speed in zip(results, speeds):
        stats = result.measurements.wall_clock
        rows.append(
            ReportRow(
                command=result.command,
                mean=Second(stats.mean).in_unit(resolved),
                stddev=Second(stats.stddev).in_unit(resolved),
                min=Second(stats.min).in_unit(resolved),
                max=Second(stats.max).in_unit(resolved),
                relative=speed,
            )
        )

    return sort_rows(rows, sort_order), resolved
