"""
Export column layouts.

CONDENSED_COLUMNS maps canonical field -> display header for the condensed
list, in output order. MOQ is renamed on purpose ("Min/Mult (MOQ)" is the
canonical name, "Min / Mult (MOQ)" the header buyers expect).
"""

from __future__ import annotations

from typing import Dict, List

CONDENSED_COLUMNS: Dict[str, str] = {
    "Manufacturer": "Manufacturer",
    "MPN": "MPN",
    "Min/Mult (MOQ)": "Min / Mult (MOQ)",
    "Unit Price": "Unit Price",
    "Stock Status": "Stock Status",
    "Quantity Avail.": "Quantity Avail.",
    "Description": "Description",
    "Datasheet": "Datasheet",
    "Product Link": "Product Link",
}

CONDENSED_HEADERS: List[str] = list(CONDENSED_COLUMNS.values())
