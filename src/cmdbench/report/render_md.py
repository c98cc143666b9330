"""Render benchmark results as a Markdown table."""

from typing import List

from cmdbench.report.table import MarkupTable


def _row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"


def render_markdown(table: MarkupTable) -> str:
    """Render a markup table as GitHub-flavored Markdown.

    The first column is left aligned, the numeric columns right aligned, and
    commands are shown as code spans.
    """
    alignment = ":---|" + "---:|" * (len(table.header) - 1)

    lines = [_row(table.header), "|" + alignment + "\n"]
    for cells in table.body:
        lines.append(_row([f"`{cells[0]}`"] + cells[1:]))

    return "".join(lines)
