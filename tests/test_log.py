from __future__ import annotations

import logging

from config.log import LOGGER_NAME, get_logger


def test_logger_writes_to_stderr(monkeypatch, capsys):
    root = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(root, "handlers", [])

    get_logger("pipeline").info("read 3 rows")

    captured = capsys.readouterr()
    assert "read 3 rows" in captured.err
    assert captured.out == ""


def test_logger_installs_one_handler(monkeypatch):
    root = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(root, "handlers", [])

    get_logger()
    get_logger("cli")

    assert len(root.handlers) == 1
    assert root.propagate is False
