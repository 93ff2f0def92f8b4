"""
Merge engine: de-duplicates canonical rows across all ingested files.

Rows sharing an identity key (trimmed, upper-cased MPN) are folded into the
first row seen for that key. Folding only fills blanks: a field that already
holds a value on the resident row is never overwritten, whatever the later
files say. Rows without an MPN are never merged and are emitted after all
keyed rows, in their original order.

Output order:
1. keyed rows, one per distinct key, in first-occurrence order
2. unkeyed rows, in input order
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from domain.canonical import (
    CANONICAL_ALIASES,
    IDENTITY_FIELD,
    CanonicalRecord,
    MergeStats,
    NormalizationResult,
    RawRecord,
)

from .headers import map_row


def _is_blank(value: Any) -> bool:
    """Absent values and empty strings count as blank; 0 and False do not."""
    return value is None or value == ""


def identity_key(value: Any) -> Optional[str]:
    """
    Derive the identity key from an MPN value.

    Returns None ("no identity") for missing, empty or whitespace-only values.

    Example:
        identity_key(" abc123 ") -> "ABC123"
    """
    if value is None:
        return None
    key = str(value).strip().upper()
    return key or None


def merge_fill(resident: CanonicalRecord, incoming: Mapping[str, Any]) -> CanonicalRecord:
    """Fill blank fields of `resident` from non-blank fields of `incoming` (in place)."""
    for name, value in incoming.items():
        if _is_blank(resident.get(name)) and not _is_blank(value):
            resident[name] = value
    return resident


def merge_records(
    records: Iterable[CanonicalRecord],
    identity_field: str = IDENTITY_FIELD,
) -> NormalizationResult:
    """
    De-duplicate canonical records by identity key and compute merge statistics.

    Records are consumed in the order given (file order, then row order).
    Resident records are the first records seen per key and are mutated in
    place when later duplicates are folded in.
    """
    keyed: Dict[str, CanonicalRecord] = {}
    unkeyed: List[CanonicalRecord] = []
    original = 0

    for record in records:
        original += 1
        key = identity_key(record.get(identity_field))

        if key is None:
            unkeyed.append(record)
            continue

        resident = keyed.get(key)
        if resident is None:
            keyed[key] = record
        else:
            merge_fill(resident, record)

    normalized = [*keyed.values(), *unkeyed]
    total = len(normalized)

    return NormalizationResult(
        normalized=normalized,
        identity_field=identity_field,
        stats=MergeStats(total=total, merged=original - total, original=original),
    )


def normalize(
    records: Iterable[RawRecord],
    aliases: Mapping[str, List[str]] = CANONICAL_ALIASES,
) -> NormalizationResult:
    """
    Canonicalize raw rows and merge duplicates.

    The raw rows are not modified. An empty input gives an empty result with
    zero statistics; callers exporting the result should treat that as an error.
    """
    return merge_records(map_row(raw, aliases) for raw in records)
