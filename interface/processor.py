"""
Bridge between Streamlit uploads and the batch pipeline.

Uploaded files are written to a per-session temp directory so the readers can
work on real paths; results come back as (success, file_name, payload, df, error).
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Iterable, List, MutableMapping, Optional, Tuple

import pandas as pd

from config import HEADERS_PREFIX, get_logger
from domain.errors import BomMergeError
from pipeline import UploadBatch, collect_headers, process_batch
from writers import export_filename, headers_to_text, rows_to_xlsx_bytes

logger = get_logger("interface")

ProcessOutcome = Tuple[bool, Optional[str], Optional[bytes], Optional[pd.DataFrame], Optional[str]]


def save_uploads(uploaded_files: Iterable, upload_dir: Path) -> List[Path]:
    """Persist Streamlit UploadedFile objects under `upload_dir`, keeping their order."""
    upload_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []
    for idx, uploaded in enumerate(uploaded_files):
        path = upload_dir / f"{idx:03d}_{Path(uploaded.name).name}"
        path.write_bytes(uploaded.getvalue())
        paths.append(path)
    return paths


def new_upload_dir() -> Path:
    return Path(tempfile.mkdtemp(prefix="bom_merge_"))


def reset_on_new_uploads(state: MutableMapping, uploaded_files: Optional[Iterable]) -> bool:
    """
    Clear status, download and preview when the uploaded file set changes.

    Files are compared by (name, size). Returns True if the state was reset.
    """
    signature = tuple((f.name, f.size) for f in uploaded_files or [])
    if signature == state.get("upload_signature"):
        return False

    state["upload_signature"] = signature
    state["status"] = ("Ready", None)
    state["result"] = None
    state["df"] = None
    return True


def process_uploaded_files(batch: UploadBatch, condensed: bool = False) -> Tuple[ProcessOutcome, str]:
    """Run the batch and render the .xlsx download. Returns (outcome, status message)."""
    try:
        result = process_batch(batch, condensed=condensed)
    except (BomMergeError, FileNotFoundError) as e:
        return (False, None, None, None, str(e)), f"Error: {e}"

    payload = rows_to_xlsx_bytes(result.rows, headers=result.columns)
    df = pd.DataFrame(result.rows, columns=result.columns).fillna("")
    return (True, export_filename(result.prefix, "xlsx"), payload, df, None), result.message


def export_headers(batch: UploadBatch) -> Tuple[ProcessOutcome, str]:
    """Collect all headers as a .txt download. Returns (outcome, status message)."""
    try:
        headers = collect_headers(batch)
    except (BomMergeError, FileNotFoundError) as e:
        return (False, None, None, None, str(e)), f"Header Error: {e}"

    payload = headers_to_text(headers).encode("utf-8")
    df = pd.DataFrame({"Header": headers})
    return (
        (True, export_filename(HEADERS_PREFIX, "txt"), payload, df, None),
        f"Exported {len(headers)} total headers to TXT.",
    )
