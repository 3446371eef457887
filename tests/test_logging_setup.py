# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from logging_setup import LOG_FILE_NAME, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_log_is_written_in_data_dir(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "data")

    assert log_file == tmp_path / "data" / LOG_FILE_NAME
    logging.getLogger("task_store").debug("hello from the store")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello from the store" in log_file.read_text(encoding="utf-8")


def test_console_only_without_log_dir(restore_root_logging) -> None:
    assert setup_logging() is None
    assert len(logging.getLogger().handlers) == 1


def test_unwritable_log_dir_falls_back_to_console(tmp_path: Path, restore_root_logging) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    assert setup_logging(log_dir=blocker / "logs") is None
