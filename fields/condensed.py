"""
Condensed list projection.

Reduces canonical rows to the fixed set of business-critical columns, renamed
to their display headers. Missing fields become empty strings; every other
field is dropped.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from domain.canonical import CanonicalRecord
from domain.schemas import CONDENSED_COLUMNS


def condense(
    records: Iterable[CanonicalRecord],
    columns: Mapping[str, str] = CONDENSED_COLUMNS,
) -> List[Dict[str, Any]]:
    """Project canonical records onto the condensed display columns (read-only)."""
    condensed: List[Dict[str, Any]] = []
    for record in records:
        row: Dict[str, Any] = {}
        for canonical, display in columns.items():
            value = record.get(canonical)
            row[display] = "" if value is None else value
        condensed.append(row)
    return condensed
