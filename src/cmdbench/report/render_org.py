"""Render benchmark results as an Org-mode table."""

from typing import List

from cmdbench.report.table import MarkupTable


def _row(cells: List[str]) -> str:
    return f"| {cells[0]}  |  " + " |  ".join(cells[1:]) + " |\n"


def render_orgmode(table: MarkupTable) -> str:
    """Render a markup table for Emacs Org-mode, commands as =verbatim=."""
    separator = "|" + "--+" * (len(table.header) - 1) + "--|\n"

    lines = [_row(table.header), separator]
    for cells in table.body:
        lines.append(_row([f"={cells[0]}="] + cells[1:]))

    return "".join(lines)
