"""
Command-line entry point.

    bom-merge mouser.xlsx digikey.csv              -> master_list_<ts>.xlsx
    bom-merge mouser.xlsx digikey.csv --condensed  -> condensed_list_<ts>.xlsx
    bom-merge mouser.xlsx digikey.csv --headers    -> exported_headers_<ts>.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config import HEADERS_PREFIX, OUTPUT_DIR_NAME
from domain.errors import BomMergeError
from pipeline import UploadBatch, collect_headers, process_batch
from writers import export_filename, write_headers_txt, write_rows_to_xlsx


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bom-merge",
        description="Merge vendor BOM exports (.xlsx/.xls/.csv) into one master list keyed by MPN.",
    )
    parser.add_argument("files", nargs="+", help="Input files, merged in the order given")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--condensed", action="store_true", help="Export only the important columns")
    mode.add_argument("--headers", action="store_true", help="Export every header of every file to TXT")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help=f"Directory for the exported file (default: ./{OUTPUT_DIR_NAME})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    output_dir = args.output_dir or Path.cwd() / OUTPUT_DIR_NAME
    batch = UploadBatch()

    try:
        batch.add_files(args.files)

        if args.headers:
            headers = collect_headers(batch)
            out = write_headers_txt(output_dir / export_filename(HEADERS_PREFIX, "txt"), headers)
            print(f"Exported {len(headers)} total headers to TXT: {out}")
            return 0

        result = process_batch(batch, condensed=args.condensed)
        out = output_dir / export_filename(result.prefix, "xlsx")
        write_rows_to_xlsx(out, result.rows, headers=result.columns)
        print(f"{result.message} -> {out}")
        return 0

    except (BomMergeError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
