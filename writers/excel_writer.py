"""
EXCEL WRITER
------------
Writes normalized or condensed rows to a single-sheet .xlsx workbook.

Column order is the order in which keys first appear across the rows, unless
explicit headers are given. Missing cells are left empty.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from config import EXPORT_SHEET_NAME


def columns_for(rows: Sequence[Dict[str, Any]]) -> List[str]:
    """Union of row keys in first-appearance order."""
    columns: Dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


def write_rows_to_xlsx(
    output: Path | BinaryIO,
    rows: Sequence[Dict[str, Any]],
    headers: Sequence[str] | None = None,
    sheet_name: str = EXPORT_SHEET_NAME,
) -> None:
    """
    Write rows to an .xlsx file or binary buffer.

    Args:
        output: Destination path or writable binary file object
        rows: Row dicts
        headers: Column order (defaults to columns_for(rows))
        sheet_name: Worksheet title
    """
    headers = list(headers) if headers is not None else columns_for(rows)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in rows:
        ws.append([row.get(h) for h in headers])

    if isinstance(output, (str, Path)):
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output)
    wb.close()


def rows_to_xlsx_bytes(
    rows: Sequence[Dict[str, Any]],
    headers: Sequence[str] | None = None,
    sheet_name: str = EXPORT_SHEET_NAME,
) -> bytes:
    """Render rows as .xlsx bytes (for in-memory downloads)."""
    buf = io.BytesIO()
    write_rows_to_xlsx(buf, rows, headers=headers, sheet_name=sheet_name)
    return buf.getvalue()
