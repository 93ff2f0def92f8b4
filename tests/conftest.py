from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

import pytest
from openpyxl import Workbook


def _write_xlsx(path: Path, header: Sequence[Any], rows: List[Sequence[Any]]) -> Path:
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    ws.append(list(header))
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return path


@pytest.fixture
def make_xlsx(tmp_path):
    """Factory: make_xlsx("name.xlsx", header, rows) -> Path."""

    def _make(name: str, header: Sequence[Any], rows: List[Sequence[Any]]) -> Path:
        return _write_xlsx(tmp_path / name, header, rows)

    return _make


@pytest.fixture
def make_csv(tmp_path):
    """Factory: make_csv("name.csv", text) -> Path."""

    def _make(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def mouser_xlsx(make_xlsx):
    return make_xlsx(
        "mouser.xlsx",
        ["Mfr Part Number", "Manufacturer Name", "Description", "Unit Price 1 (EUR)", "Min./Mult."],
        [
            ["LM317T", "Texas Instruments", "Linear regulator", 0.52, "1 / 1"],
            ["NE555P", "Texas Instruments", "", 0.31, "1 / 1"],
            ["", "", "Mounting screw", "", ""],
        ],
    )


@pytest.fixture
def digikey_csv(make_csv):
    return make_csv(
        "digikey.csv",
        "Part Number,Mfr.,Description,Datasheet URL,Package\n"
        "ne555p ,STMicro,Timer IC,https://example.com/ne555.pdf,DIP-8\n"
        "BC547B,onsemi,NPN transistor,,TO-92\n"
        "lm317t,,Adjustable regulator,https://example.com/lm317.pdf,TO-220\n",
    )
