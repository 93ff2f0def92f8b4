"""
Header inventory export (one header per line, plain text).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


def headers_to_text(headers: Sequence[str]) -> str:
    return "\n".join(headers)


def write_headers_txt(output_path: Path, headers: Sequence[str]) -> Path:
    """Write the header inventory to `output_path` and return the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(headers_to_text(headers), encoding="utf-8")
    return output_path
