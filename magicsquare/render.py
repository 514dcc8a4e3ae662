"""Presentation helpers for generated squares."""

from __future__ import annotations

import csv
import io
import json
from typing import Iterable, List, Sequence

TABLE_STYLE = "border-collapse:collapse; border-spacing:0;"
CELL_STYLE = (
    "border:1px solid black; font-family:monospace; "
    "text-align:center; vertical-align:middle;"
)


def render_html(
    square: Sequence[Sequence[int]],
    use_default_style: bool = True,
    table_class: str = "",
) -> str:
    """Render ``square`` as an HTML table.

    Rows are emitted top to bottom and cells left to right. An empty square
    renders as an empty string.
    """

    if not square:
        return ""

    table_style = TABLE_STYLE if use_default_style else ""
    cell_style = CELL_STYLE if use_default_style else ""

    parts: List[str] = [f'<table class="{table_class}" style="{table_style}">']
    for row in square:
        parts.append("<tr>")
        parts.extend(f'<td style="{cell_style}">{value}</td>' for value in row)
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts)


def render_text(square: Sequence[Sequence[int]]) -> str:
    """Render ``square`` as right-aligned columns separated by two spaces."""

    if not square:
        return ""

    cells = [[str(value) for value in row] for row in square]
    width = max(len(cell) for row in cells for cell in row)

    def fmt(row: Iterable[str]) -> str:
        return "  ".join(cell.rjust(width) for cell in row)

    return "\n".join(fmt(row) for row in cells)


def render_json(square: Sequence[Sequence[int]], *, indent: int | None = None) -> str:
    return json.dumps([list(row) for row in square], indent=indent)


def render_csv(square: Sequence[Sequence[int]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in square:
        writer.writerow(list(row))
    return buffer.getvalue()


def sum_line(order: int, total: int) -> str:
    return f"Sum per row/col/diagonal for {order} x {order} magic square: {total}"


__all__ = [
    "CELL_STYLE",
    "TABLE_STYLE",
    "render_csv",
    "render_html",
    "render_json",
    "render_text",
    "sum_line",
]
