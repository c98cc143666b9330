"""Render benchmark results as CSV."""

from typing import Dict, List, Sequence

import pandas as pd

from cmdbench.benchmark.result import BenchmarkResult

CSV_COLUMNS = ["command", "mean", "stddev", "median", "user", "system", "min", "max"]


def results_to_dataframe(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
    """One row per result with statistics in seconds.

    Each parameter name seen in any result becomes a ``parameter_<name>``
    column, in order of first appearance.
    """
    parameter_names: List[str] = []
    for result in results:
        for name in result.parameters:
            if name not in parameter_names:
                parameter_names.append(name)

    records: List[Dict[str, object]] = []
    for result in results:
        entry = result.to_dict()
        record = {column: entry[column] for column in CSV_COLUMNS}
        for name in parameter_names:
            record[f"parameter_{name}"] = result.parameters.get(name, "")
        records.append(record)

    columns = CSV_COLUMNS + [f"parameter_{name}" for name in parameter_names]
    return pd.DataFrame(records, columns=columns)


def render_csv(results: Sequence[BenchmarkResult]) -> str:
    """Render results as CSV text, values in seconds, input order."""
    return results_to_dataframe(results).to_csv(index=False, lineterminator="\n")
