"""Render benchmark results as an Asciidoc table."""

from typing import List

from cmdbench.report.table import MarkupTable


def _cell_block(cells: List[str]) -> str:
    return "".join(f"| {cell} \n" for cell in cells)


def render_asciidoc(table: MarkupTable) -> str:
    """Render a markup table as Asciidoc, one cell per line."""
    cols = ",".join(["<"] + [">"] * (len(table.header) - 1))

    blocks = [_cell_block(table.header)]
    for cells in table.body:
        blocks.append(_cell_block([f"`{cells[0]}`"] + cells[1:]))

    return f'[cols="{cols}"]\n|===\n' + "\n".join(blocks) + "|===\n"
