"""
Batch processing: the end-to-end flow behind "Process All", "Condensed List"
and "Export Headers".

An UploadBatch is owned by the caller (one per UI session or CLI run) and
holds the submitted files in order plus a processing flag. Files are read
sequentially in submission order so the merge sees rows in a reproducible
order: file order, then row order within each file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from config import CONDENSED_PREFIX, MASTER_PREFIX, get_logger
from domain.canonical import MergeStats, RawRecord
from domain.errors import BomMergeError, NoDataError, NoValidFilesError
from domain.schemas import CONDENSED_HEADERS
from fields import condense, normalize
from input_readers import is_supported_file, read_table
from writers import columns_for

logger = get_logger("pipeline")


@dataclass
class UploadBatch:
    files: List[Path] = field(default_factory=list)
    processing: bool = False

    def add_files(self, paths: Iterable[str | Path]) -> List[Path]:
        """
        Append supported files (.xlsx/.xls/.csv) in the order given.

        Returns the accepted files. Ignored while a run is in progress.

        Raises:
            NoValidFilesError: If none of `paths` is a supported spreadsheet
        """
        if self.processing:
            logger.warning("Batch is processing; ignoring %d new file(s)", len(list(paths)))
            return []

        accepted = [Path(p) for p in paths if is_supported_file(p)]
        if not accepted:
            raise NoValidFilesError("Please upload a valid Excel or CSV file.")

        self.files.extend(accepted)
        return accepted

    def clear(self) -> None:
        self.files.clear()
        self.processing = False


@dataclass
class BatchResult:
    rows: List[Dict[str, Any]]
    columns: List[str]
    stats: MergeStats
    prefix: str
    message: str


def collect_records(batch: UploadBatch) -> Tuple[List[RawRecord], List[str]]:
    """Read every file in the batch; return all rows and all header cells, in order."""
    records: List[RawRecord] = []
    headers: List[str] = []

    for path in batch.files:
        table = read_table(path)
        logger.info("Read %s: %d rows, %d headers", table.name, len(table.rows), len(table.headers))
        records.extend(table.rows)
        headers.extend(table.headers)

    return records, headers


def process_batch(batch: UploadBatch, condensed: bool = False) -> BatchResult:
    """
    Read, normalize and merge the batch, optionally projecting the condensed list.

    Raises:
        NoDataError: If the batch produces no rows
        IngestionError / FileNotFoundError: From the readers
    """
    if not batch.files:
        raise NoDataError("No files selected.")

    batch.processing = True
    try:
        records, _ = collect_records(batch)
        result = normalize(records)

        if not result.normalized:
            raise NoDataError("No data found to process.")

        stats = result.stats
        logger.info(
            "Normalized %d rows into %d items (merged %d) keyed on %s",
            stats.original,
            stats.total,
            stats.merged,
            result.identity_field,
        )

        if condensed:
            rows = condense(result.normalized)
            return BatchResult(
                rows=rows,
                columns=list(CONDENSED_HEADERS),
                stats=stats,
                prefix=CONDENSED_PREFIX,
                message=f"Success! Exported {len(rows)} items with important columns only.",
            )

        return BatchResult(
            rows=result.normalized,
            columns=columns_for(result.normalized),
            stats=stats,
            prefix=MASTER_PREFIX,
            message=(
                f'Done! Key: "{result.identity_field}". '
                f"Saved {stats.total} items (Merged {stats.merged})."
            ),
        )
    except BomMergeError as e:
        logger.error("Batch processing failed: %s", e)
        raise
    except Exception:
        logger.exception("Batch processing failed")
        raise
    finally:
        batch.processing = False


def collect_headers(batch: UploadBatch) -> List[str]:
    """
    Return every header cell of every file, in order (duplicates kept).

    Raises:
        NoDataError: If no file has any header
    """
    batch.processing = True
    try:
        headers: List[str] = []
        for path in batch.files:
            headers.extend(read_table(path).headers)

        if not headers:
            raise NoDataError("No headers found in selected files.")

        logger.info("Collected %d headers from %d file(s)", len(headers), len(batch.files))
        return headers
    finally:
        batch.processing = False
