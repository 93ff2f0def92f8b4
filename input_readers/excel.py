"""
EXCEL READER
------------
Reads the first sheet of an .xlsx workbook into raw rows with NO header mapping.
Rows keep the original supplier column names as keys.
"""

from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook

from domain.errors import IngestionError

from .table import SourceTable, build_table, clean_cell


def read_excel(xlsx_path: Path, sheet_name: str | None = None) -> SourceTable:
    """
    Read Excel file where row 1 = headers, rows 2+ = data.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        SourceTable with row dicts (original headers as keys, empty cells as "")
        and the non-empty header cells of row 1

    Raises:
        FileNotFoundError: If file doesn't exist
        IngestionError: If file is not a valid Excel file
    """
    xlsx_path = Path(xlsx_path).expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")

    try:
        wb = load_workbook(xlsx_path, data_only=True, read_only=True)
    except Exception as e:
        raise IngestionError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    try:
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        grid = ([clean_cell(v) for v in values] for values in ws.iter_rows(values_only=True))
        return build_table(xlsx_path.name, grid)
    finally:
        wb.close()
