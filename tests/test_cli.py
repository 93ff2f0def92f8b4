from __future__ import annotations

from openpyxl import load_workbook

from interface.cli import main


def test_cli_master_export(tmp_path, mouser_xlsx, digikey_csv, capsys):
    out_dir = tmp_path / "exports"
    code = main([str(mouser_xlsx), str(digikey_csv), "-o", str(out_dir)])

    assert code == 0
    files = list(out_dir.glob("master_list_*.xlsx"))
    assert len(files) == 1
    rows = list(load_workbook(files[0]).active.iter_rows(values_only=True))
    assert len(rows) == 5
    assert "Saved 4 items (Merged 2)" in capsys.readouterr().out


def test_cli_condensed_export(tmp_path, mouser_xlsx):
    out_dir = tmp_path / "exports"
    assert main([str(mouser_xlsx), "--condensed", "-o", str(out_dir)]) == 0
    files = list(out_dir.glob("condensed_list_*.xlsx"))
    header = next(load_workbook(files[0]).active.iter_rows(values_only=True))
    assert header[2] == "Min / Mult (MOQ)"


def test_cli_headers_export(tmp_path, mouser_xlsx, digikey_csv):
    out_dir = tmp_path / "exports"
    assert main([str(mouser_xlsx), str(digikey_csv), "--headers", "-o", str(out_dir)]) == 0
    (txt,) = out_dir.glob("exported_headers_*.txt")
    assert len(txt.read_text(encoding="utf-8").splitlines()) == 10


def test_cli_reports_no_data(tmp_path, make_xlsx, capsys):
    path = make_xlsx("empty.xlsx", ["MPN"], [])
    assert main([str(path), "-o", str(tmp_path)]) == 1
    assert "No data found to process." in capsys.readouterr().err


def test_cli_rejects_unsupported_files(tmp_path, capsys):
    assert main([str(tmp_path / "notes.pdf"), "-o", str(tmp_path)]) == 1
    assert "valid Excel or CSV" in capsys.readouterr().err


def test_cli_default_output_dir_is_under_working_directory(tmp_path, monkeypatch, mouser_xlsx):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(mouser_xlsx)]) == 0
    assert len(list((workdir / "bom_outputs").glob("master_list_*.xlsx"))) == 1


def test_cli_stdout_holds_only_the_result_line(tmp_path, mouser_xlsx, capsys):
    assert main([str(mouser_xlsx), "-o", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.startswith('Done! Key: "MPN".')
