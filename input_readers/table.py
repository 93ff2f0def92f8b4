"""
TABLE MODEL
-----------
Shared result type and cell/header cleanup for all spreadsheet readers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd

from config import MAX_SHEET_ROWS
from domain.errors import IngestionError


@dataclass
class SourceTable:
    """One ingested file: its data rows and the header cells of row 1."""

    name: str
    rows: List[Dict[str, Any]] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)


def clean_cell(value: Any) -> Any:
    """Convert empty/NA cells to "" and numpy scalars to plain Python values."""
    if value is None:
        return ""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return ""
    if value is pd.NaT or value is pd.NA:
        return ""
    return value


def row_keys(header_cells: Sequence[Any]) -> List[str]:
    """
    Build unique row keys from the header row.

    Empty header cells become "col_<n>"; repeated headers get "_1", "_2", ...
    so keys within a row are unique.
    """
    keys: List[str] = []
    seen: Dict[str, int] = {}
    for c, h in enumerate(header_cells, start=1):
        key = str(h) if h != "" else f"col_{c}"
        if key in seen:
            seen[key] += 1
            key = f"{key}_{seen[key]}"
        seen.setdefault(key, 0)
        keys.append(key)
    return keys


def header_inventory(header_cells: Sequence[Any]) -> List[str]:
    """Non-empty header cells as text, in column order."""
    return [str(h) for h in header_cells if h != ""]


def build_table(name: str, grid: Iterable[Sequence[Any]]) -> SourceTable:
    """
    Turn a cleaned cell grid (row 1 = headers) into a SourceTable.

    Fully empty data rows are skipped.
    """
    it = iter(grid)
    try:
        header_cells = list(next(it))
    except StopIteration:
        return SourceTable(name=name)

    keys = row_keys(header_cells)
    rows: List[Dict[str, Any]] = []

    for values in it:
        row: Dict[str, Any] = {}
        is_empty = True

        for key, value in zip(keys, values):
            if value != "":
                is_empty = False
            row[key] = value

        for key in keys[len(row):]:
            row[key] = ""

        if not is_empty:
            rows.append(row)
            if len(rows) > MAX_SHEET_ROWS:
                raise IngestionError(
                    f"{name} has more than {MAX_SHEET_ROWS:,} data rows. Split the file and try again."
                )

    return SourceTable(name=name, rows=rows, headers=header_inventory(header_cells))


def frame_to_table(name: str, df: pd.DataFrame) -> SourceTable:
    """Build a SourceTable from a header-less DataFrame (row 0 = headers)."""
    grid = ([clean_cell(v) for v in values] for values in df.itertuples(index=False, name=None))
    return build_table(name, grid)
