"""Export benchmark results in one of the supported report formats."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

from cmdbench.benchmark.result import BenchmarkResult
from cmdbench.errors import EmptySampleSetError, EncodingFailureError
from cmdbench.report.aggregate import build_report_rows
from cmdbench.report.render_adoc import render_asciidoc
from cmdbench.report.render_csv import render_csv
from cmdbench.report.render_json import render_json
from cmdbench.report.render_md import render_markdown
from cmdbench.report.render_org import render_orgmode
from cmdbench.report.table import MarkupTable, build_markup_table
from cmdbench.units import SortOrder, Unit

logger = logging.getLogger(__name__)


class ExportFormat(Enum):
    """Supported report formats."""

    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"
    ORGMODE = "orgmode"
    CSV = "csv"
    JSON = "json"

    @property
    def is_markup(self) -> bool:
        return self in _MARKUP_RENDERERS

    @classmethod
    def from_name(cls, name: str) -> "ExportFormat":
        key = name.strip().lower()
        for fmt in cls:
            if key == fmt.value:
                return fmt
        choices = ", ".join(fmt.value for fmt in cls)
        raise ValueError(f"Unknown export format '{name}'. Use one of: {choices}")


_MARKUP_RENDERERS: Dict[ExportFormat, Callable[[MarkupTable], str]] = {
    ExportFormat.MARKDOWN: render_markdown,
    ExportFormat.ASCIIDOC: render_asciidoc,
    ExportFormat.ORGMODE: render_orgmode,
}

_DATA_RENDERERS: Dict[ExportFormat, Callable[[Sequence[BenchmarkResult]], str]] = {
    ExportFormat.CSV: render_csv,
    ExportFormat.JSON: render_json,
}


def render(
    results: Sequence[BenchmarkResult],
    export_format: ExportFormat,
    unit: Optional[Unit] = None,
    sort_order: SortOrder = SortOrder.COMMAND,
) -> str:
    """Render results to report text without encoding it.

    Markup formats show statistics in the resolved unit and honor
    ``sort_order``. CSV and JSON always report seconds in input order.
    """
    if export_format.is_markup:
        rows, resolved = build_report_rows(results, unit, sort_order)
        table = build_markup_table(rows, resolved)
        return _MARKUP_RENDERERS[export_format](table)

    if not results:
        raise EmptySampleSetError()
    for result in results:
        result.ensure_measured()
    return _DATA_RENDERERS[export_format](results)


def export(
    results: Sequence[BenchmarkResult],
    export_format: ExportFormat,
    unit: Optional[Unit] = None,
    sort_order: SortOrder = SortOrder.COMMAND,
) -> bytes:
    """Export results as UTF-8 encoded report bytes.

    Args:
        results: Completed benchmark results, in original command order
        export_format: Target report format
        unit: Explicit time unit, or None to resolve from the first result
        sort_order: Row order for markup formats

    Returns:
        The full report, ending with a newline

    Raises:
        EmptySampleSetError: no results, or a result without measurements
        UndefinedRatioError: a mean wall-clock time is zero
        EncodingFailureError: the report text is not valid UTF-8 text
    """
    text = render(results, export_format, unit, sort_order)

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingFailureError(f"Cannot encode {export_format.value} report as UTF-8: {e}") from e

    logger.debug(f"Exported {len(results)} results as {export_format.value} ({len(data)} bytes)")
    return data
