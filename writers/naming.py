"""Timestamped export file names (UTC), e.g. master_list_2025-01-31T14-05-09.xlsx."""

from __future__ import annotations

from datetime import datetime, timezone

from config import TIMESTAMP_FORMAT


def export_filename(prefix: str, ext: str, now: datetime | None = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).strftime(TIMESTAMP_FORMAT)
    return f"{prefix}_{stamp}.{ext.lstrip('.')}"
