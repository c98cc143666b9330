"""Format-independent table shared by the markup renderers."""

from dataclasses import dataclass
from typing import List, Sequence

from cmdbench.report.aggregate import ReportRow
from cmdbench.report.formatting import format_absolute, format_ratio
from cmdbench.units import Unit


@dataclass(frozen=True)
class MarkupTable:
    """Header cells plus body rows of already formatted cells.

    The first body cell of each row is the raw command; renderers apply their
    own verbatim markers to it.
    """
    header: List[str]
    body: List[List[str]]


def build_markup_table(rows: Sequence[ReportRow], unit: Unit) -> MarkupTable:
    """Format report rows into the five-column markup table."""
    notation = f"[{unit.short_name}]"
    header = [
        "Command",
        f"Mean {notation}",
        f"Min {notation}",
        f"Max {notation}",
        "Relative",
    ]

    body = []
    for row in rows:
        mean = f"{format_absolute(row.mean)} ± {format_absolute(row.stddev)}"
        relative = format_ratio(row.relative.ratio)
        if not row.relative.is_baseline:
            relative += f" ± {format_ratio(row.relative.ratio_stddev)}"
        body.append([
            row.command,
            mean,
            format_absolute(row.min),
            format_absolute(row.max),
            relative,
        ])

    return MarkupTable(header=header, body=body)
