"""
Canonical BOM schema definition.

CANONICAL_ALIASES is the declarative alias table: each canonical field maps to
the ordered list of raw header spellings that vendor exports use for it
(Mouser, DigiKey, LCSC, Octopart BOM tool, ...). All ingestion layers map
their rows into canonical records keyed by these field names before merging.

Order matters twice: canonical fields are tried in declaration order, and
within a field aliases are tried in list order. The first match wins, so a
spelling listed under two fields (e.g. "Availability") belongs to the earlier
one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


CANONICAL_ALIASES: Dict[str, List[str]] = {
    "MPN": ["Mfr Part Number", "BOM: Matched MPN", "Mrf#", "MPN", "Part Number", "LCSC#"],
    "Manufacturer": ["Manufacturer Name", "BOM: Manufacturer Name", "Mfr."],
    "Description": ["Description", "BOM: Description"],
    "Required Qty": ["Quantity 1", "BOM: Requested Qty", "Quantity"],
    "Unit Price": ["Unit Price 1 (EUR)", "BOM: Unit Price($)", "Unit Price(USD)"],
    "Total Price": ["Order Unit Price (EUR)", "BOM: Total Line Price($)", "Ext.Price(USD)"],
    "Stock Status": ["Availability", "BOM: Stock Status", "Stock Status"],
    "Quantity Avail.": ["BOM: Stock Availability", "Availability"],
    "Lead Time": ["Lead Time in Days", "BOM: Mfg Lead Time (weeks)", "Target Lead Time"],
    "Min/Mult (MOQ)": ["Min./Mult.", "Min / Mult"],
    "Datasheet": ["Datasheet URL"],
    "Product Link": ["Product Link"],
}

CANONICAL_FIELDS = tuple(CANONICAL_ALIASES)

IDENTITY_FIELD = "MPN"

# One spreadsheet row as read from a vendor file (original headers as keys).
RawRecord = Dict[str, Any]

# One row keyed by canonical field names (or original header for passthrough fields).
CanonicalRecord = Dict[str, Any]


@dataclass(frozen=True)
class MergeStats:
    total: int = 0
    merged: int = 0
    original: int = 0


@dataclass
class NormalizationResult:
    normalized: List[CanonicalRecord] = field(default_factory=list)
    identity_field: str = IDENTITY_FIELD
    stats: MergeStats = field(default_factory=MergeStats)
