"""
Table Builder
=============
Replaces runs of pipe-delimited lines with a single <table> line.
The separator row (`|---|:--:|`) is dropped; the first remaining row is
the header, every further row is a body row.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DELIMITER = "|"

# Starts with "|" and has at least one more "|" later on
TABLE_ROW_PATTERN = re.compile(r"^\s*\|.*\|")

# "|", then only dashes/colons/whitespace/pipes, then "|"
SEPARATOR_PATTERN = re.compile(r"^\s*\|[\s\-:|]*\|\s*$")


def is_table_row(line: str) -> bool:
    return bool(TABLE_ROW_PATTERN.match(line))


def is_separator_row(line: str) -> bool:
    return bool(SEPARATOR_PATTERN.match(line))


def split_cells(line: str) -> list[str]:
    """Split a row on the delimiter, dropping the outer empty fields."""
    cells = line.strip().split(DELIMITER)
    if cells and not cells[0].strip():
        cells = cells[1:]
    if cells and not cells[-1].strip():
        cells = cells[:-1]
    return [cell.strip() for cell in cells]


def render_table(rows: list[str]) -> str:
    """Build table markup from one run of table rows."""
    rows = [row for row in rows if not is_separator_row(row)]
    if not rows:
        return ""

    header, body = split_cells(rows[0]), [split_cells(row) for row in rows[1:]]

    parts = ["<table><thead><tr>"]
    parts.extend(f"<th>{cell}</th>" for cell in header)
    parts.append("</tr></thead>")
    if body:
        parts.append("<tbody>")
        for cells in body:
            parts.append("<tr>")
            parts.extend(f"<td>{cell}</td>" for cell in cells)
            parts.append("</tr>")
        parts.append("</tbody>")
    parts.append("</table>")
    return "".join(parts)


def build_tables(lines: list[str]) -> list[str]:
    """Pass non-table lines through; replace each table run wholesale."""
    output: list[str] = []
    run: list[str] = []

    def flush_run():
        if run:
            table = render_table(run)
            if table:
                output.append(table)
            logger.debug(f"Built table from {len(run)} row(s)")
            run.clear()

    for line in lines:
        if is_table_row(line):
            run.append(line)
            continue
        flush_run()
        output.append(line)

    flush_run()
    return output
