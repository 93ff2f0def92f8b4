"""
CSV / LEGACY EXCEL READER
-------------------------
Reads .csv and .xls files through pandas into raw rows with NO header mapping.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from domain.errors import IngestionError

from .table import SourceTable, frame_to_table


def _max_width(csv_path: Path) -> int:
    """Number of fields in the widest line (0 for an empty file)."""
    with open(csv_path, newline="", encoding="utf-8-sig") as f:
        return max((len(row) for row in csv.reader(f)), default=0)


def read_csv(csv_path: Path) -> SourceTable:
    """
    Read a CSV file where line 1 = headers. All cells are kept as text.

    Data rows wider than the header row are kept; their extra cells get
    "col_<n>" keys.

    Raises:
        FileNotFoundError: If file doesn't exist
        IngestionError: If the file cannot be parsed
    """
    csv_path = Path(csv_path).expanduser().resolve()
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    try:
        width = _max_width(csv_path)
        if width == 0:
            return SourceTable(name=csv_path.name)

        df = pd.read_csv(
            csv_path,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        return SourceTable(name=csv_path.name)
    except Exception as e:
        raise IngestionError(f"Cannot read CSV file {csv_path.name}: {e}") from e

    return frame_to_table(csv_path.name, df)


def read_legacy_excel(xls_path: Path) -> SourceTable:
    """
    Read the first sheet of a legacy .xls workbook (row 1 = headers).

    Raises:
        FileNotFoundError: If file doesn't exist
        IngestionError: If the workbook cannot be opened
    """
    xls_path = Path(xls_path).expanduser().resolve()
    if not xls_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xls_path}")

    try:
        df = pd.read_excel(xls_path, sheet_name=0, header=None, dtype=object)
    except Exception as e:
        raise IngestionError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    return frame_to_table(xls_path.name, df)
