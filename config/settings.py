"""
Central configuration for export paths and safety limits.

This module defines:
- Default output directory name used by the CLI.
- File and sheet limits to prevent memory issues and oversized spreadsheets.
- Accepted input extensions and export naming (prefixes, sheet name, timestamp).

All values are constants and should be imported where needed (no runtime logic here).
"""

from __future__ import annotations

import os


# Relative to the working directory of the run (never the install location).
OUTPUT_DIR_NAME = "bom_outputs"

MAX_FILE_SIZE_MB = 50
MAX_SHEET_ROWS = 100_000

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")

MASTER_PREFIX = "master_list"
CONDENSED_PREFIX = "condensed_list"
HEADERS_PREFIX = "exported_headers"

EXPORT_SHEET_NAME = "Normalized"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"

LOG_LEVEL = os.getenv("BOM_MERGE_LOG_LEVEL", "INFO")
