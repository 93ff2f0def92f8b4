"""
Input readers: turn vendor files into raw rows plus their header inventory.

read_table() picks the reader by file extension (.xlsx, .xls, .csv).
"""

from __future__ import annotations

from pathlib import Path

from config import MAX_FILE_SIZE_MB, SUPPORTED_EXTENSIONS
from domain.errors import IngestionError

from .excel import read_excel
from .frames import read_csv, read_legacy_excel
from .table import SourceTable


def is_supported_file(name: str | Path) -> bool:
    """True if the file name ends in a supported spreadsheet extension (any case)."""
    return Path(name).suffix.lower() in SUPPORTED_EXTENSIONS


def read_table(path: str | Path) -> SourceTable:
    """Read one spreadsheet file, dispatching on its extension."""
    path = Path(path)
    if not is_supported_file(path):
        raise IngestionError(f"Unsupported file type: {path.name}")

    if path.exists() and path.stat().st_size > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise IngestionError(f"{path.name} exceeds the {MAX_FILE_SIZE_MB} MB limit")

    suffix = path.suffix.lower()
    if suffix == ".xlsx":
        return read_excel(path)
    if suffix == ".xls":
        return read_legacy_excel(path)
    return read_csv(path)


__all__ = [
    "SourceTable",
    "is_supported_file",
    "read_csv",
    "read_excel",
    "read_legacy_excel",
    "read_table",
]
