"""Render benchmark results as JSON."""

import json
from typing import Sequence

from cmdbench.benchmark.result import BenchmarkResult


def render_json(results: Sequence[BenchmarkResult]) -> str:
    """Render results as an indented JSON document with raw samples."""
    document = {"results": [result.to_dict() for result in results]}
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
