"""Benchmark result aggregation and reporting."""

from .aggregate import ReportRow, build_report_rows, load_results, sort_rows
from .export import ExportFormat, export, render
from .table import MarkupTable, build_markup_table

__all__ = [
    "ReportRow",
    "build_report_rows",
    "load_results",
    "sort_rows",
    "ExportFormat",
    "export",
    "render",
    "MarkupTable",
    "build_markup_table",
]
