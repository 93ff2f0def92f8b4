"""
Header canonicalization.

Resolves raw vendor column headers to canonical field names using the alias
table, and maps whole rows onto canonical keys.

Rules:
- Comparison is exact after trimming and case-folding both sides.
- Canonical fields are tried in table order, aliases in list order; first match wins.
- Unknown headers pass through with their original spelling (no trimming).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from domain.canonical import CANONICAL_ALIASES, CanonicalRecord, RawRecord


def _clean(header: Any) -> str:
    """Normalize a header for comparison only."""
    return str(header).strip().casefold()


def canonicalize_header(header: str, aliases: Mapping[str, List[str]] = CANONICAL_ALIASES) -> str:
    """
    Return the canonical field name for `header`, or `header` itself if unrecognized.

    Example:
        canonicalize_header(" mfr.  ") -> "Manufacturer"
        canonicalize_header("Package") -> "Package"
    """
    wanted = _clean(header)
    for canonical, candidates in aliases.items():
        for candidate in candidates:
            if _clean(candidate) == wanted:
                return canonical
    return header


def map_row(raw: RawRecord, aliases: Mapping[str, List[str]] = CANONICAL_ALIASES) -> CanonicalRecord:
    """
    Build a canonical record from one raw row.

    When two raw headers resolve to the same canonical field, the later one in
    the row's column order wins.
    """
    mapped: Dict[str, Any] = {}
    for header, value in raw.items():
        mapped[canonicalize_header(header, aliases)] = value
    return mapped
