"""HTML reports of a result table, ready to be printed or archived."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape
from os import PathLike
from pathlib import Path
from typing import Any

from transitdesk.database import Table

REPORT_TITLE = "ERP - COMmANDE LIST"

_EMPTY_CELL = "&nbsp;"


def _simplified(value: Any) -> str:
    """Text of a cell with surrounding whitespace removed and inner runs collapsed."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _visible_columns(table: Table, hidden_columns: Iterable[int | str]) -> list[int]:
    hidden: set[int] = set()
    for column in hidden_columns:
        if isinstance(column, int):
            if not 0 <= column < len(table.headers):
                raise IndexError(column)
            hidden.add(column)
        else:
            try:
                hidden.add(table.headers.index(column))
            except ValueError:
                raise KeyError(column) from None
    return [index for index in range(len(table.headers)) if index not in hidden]


def render_html(
    table: Table,
    heading: str | None = None,
    hidden_columns: Iterable[int | str] = (),
) -> str:
    """Render a table as an HTML document.

    Hidden columns may be given by position or by header. Empty cells are
    shown as a non-breaking space so that the grid keeps its shape.
    """
    columns = _visible_columns(table, hidden_columns)
    parts = [
        "<html>\n",
        "<head>\n",
        '<meta content="text/html; charset=utf-8">\n',
        f"<title>{escape(REPORT_TITLE)}</title>\n",
        "</head>\n",
        "<body bgcolor=#ffffff link=#5000A0>\n",
    ]
    if heading:
        parts.append(
            f'<h1 style="text-align: center;"><strong>{escape(heading)}</strong></h1>\n'
        )
    parts.append(
        '<table style="text-align: center; margin:auto; font-size: 20px;" border=1>\n'
    )
    header_cells = "".join(f"<th>{escape(str(table.headers[i]))}</th>" for i in columns)
    parts.append(f"<thead><tr bgcolor=#d6e5ff>{header_cells}</tr></thead>\n")
    for row in table:
        cells = []
        for index in columns:
            text = _simplified(row[index])
            cells.append(f"<td bkcolor=0>{escape(text) if text else _EMPTY_CELL}</td>")
        parts.append(f"<tr>{''.join(cells)}</tr>\n")
    parts.append("</table>\n</body>\n</html>\n")
    return "".join(parts)


def save_report(
    table: Table, path: str | PathLike[str], heading: str | None = None
) -> Path:
    """Write the HTML report of a table to a file and return its path."""
    target = Path(path)
    target.write_text(render_html(table, heading), encoding="utf-8")
    return target