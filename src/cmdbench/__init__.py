"""cmdbench: summarize command benchmark results into report tables."""

from cmdbench.benchmark import BenchmarkResult, Byte, Measurement, Measurements, Second
from cmdbench.errors import EmptySampleSetError, EncodingFailureError, ExportError, UndefinedRatioError
from cmdbench.report.export import ExportFormat, export
from cmdbench.units import SortOrder, Unit, resolve_unit

__version__ = "0.1.0"

__all__ = [
    "BenchmarkResult",
    "Byte",
    "Measurement",
    "Measurements",
    "Second",
    "EmptySampleSetError",
    "EncodingFailureError",
    "ExportError",
    "UndefinedRatioError",
    "ExportFormat",
    "export",
    "SortOrder",
    "Unit",
    "resolve_unit",
]
