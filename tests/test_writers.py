from __future__ import annotations

import io
from datetime import datetime, timezone

from openpyxl import load_workbook

from writers import columns_for, export_filename, rows_to_xlsx_bytes, write_headers_txt, write_rows_to_xlsx


def test_columns_for_first_appearance_order():
    rows = [{"MPN": "A", "Qty": 1}, {"Description": "d", "MPN": "B"}, {"Qty": 2, "Link": "x"}]
    assert columns_for(rows) == ["MPN", "Qty", "Description", "Link"]


def test_write_rows_to_xlsx_roundtrip(tmp_path):
    path = tmp_path / "out" / "master.xlsx"
    write_rows_to_xlsx(path, [{"MPN": "A", "Qty": 3}, {"MPN": "B", "Note": "n"}])

    wb = load_workbook(path)
    ws = wb.active
    assert ws.title == "Normalized"
    values = [list(r) for r in ws.iter_rows(values_only=True)]
    assert values[0] == ["MPN", "Qty", "Note"]
    assert values[1] == ["A", 3, None]
    assert values[2] == ["B", None, "n"]


def test_rows_to_xlsx_bytes_with_explicit_headers():
    payload = rows_to_xlsx_bytes([{"b": 1, "a": 2}], headers=["a", "b"], sheet_name="Condensed")
    ws = load_workbook(io.BytesIO(payload)).active
    assert ws.title == "Condensed"
    assert [list(r) for r in ws.iter_rows(values_only=True)] == [["a", "b"], [2, 1]]


def test_export_filename():
    now = datetime(2025, 1, 31, 14, 5, 9)
    assert export_filename("master_list", "xlsx", now) == "master_list_2025-01-31T14-05-09.xlsx"
    assert export_filename("exported_headers", ".txt", now) == "exported_headers_2025-01-31T14-05-09.txt"


def test_write_headers_txt(tmp_path):
    out = write_headers_txt(tmp_path / "h.txt", ["MPN", "Mfr.", "MPN"])
    assert out.read_text(encoding="utf-8") == "MPN\nMfr.\nMPN"


def test_export_filename_defaults_to_utc_now():
    name = export_filename("master_list", "xlsx")
    stamp = name[len("master_list_"):-len(".xlsx")]
    parsed = datetime.strptime(stamp, "%Y-%m-%dT%H-%M-%S").replace(tzinfo=timezone.utc)
    assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 60
