from __future__ import annotations

import os
from pathlib import Path
import time

from loguru import logger

from app.viewmodels.main_vm import MainVM
from infrastructure import logging as app_logging


def test_init_logging_writes_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    app_logging.init_logging(str(log_dir), level="DEBUG")
    try:
        logger.info("hello from the viewer")
        logger.complete()
    finally:
        logger.remove()

    latest = app_logging.find_latest_log_file(str(log_dir))
    assert latest is not None
    assert "hello from the viewer" in latest.read_text(encoding="utf-8")


def test_directory_failure_reaches_stderr(capsys, tmp_path: Path) -> None:
    app_logging.init_logging(str(tmp_path / "logs"))
    try:
        vm = MainVM(image_service=None)
        assert vm.open_folder(str(tmp_path / "missing")) is False
        logger.info("routine detail")
        logger.complete()
    finally:
        logger.remove()

    err = capsys.readouterr().err
    assert "Could not open directory" in err
    assert "routine detail" not in err


def test_find_latest_log_file_picks_newest(tmp_path: Path) -> None:
    old = tmp_path / "app_20240101.log"
    new = tmp_path / "app_20240102.log"
    old.write_text("old", encoding="utf-8")
    new.write_text("new", encoding="utf-8")
    past = time.time() - 3600
    os.utime(old, (past, past))
    (tmp_path / "other.log").write_text("ignored", encoding="utf-8")

    assert app_logging.find_latest_log_file(str(tmp_path)) == new


def test_find_latest_log_file_handles_missing_dir(tmp_path: Path) -> None:
    assert app_logging.find_latest_log_file(str(tmp_path / "missing")) is None
    assert app_logging.find_latest_log_file(str(tmp_path)) is None


def test_open_latest_log_without_logs(tmp_path: Path) -> None:
    assert app_logging.open_latest_log(str(tmp_path)) is False


def test_open_failure_returns_false(monkeypatch, tmp_path: Path) -> None:
    def boom(*args, **kwargs):
        raise OSError("no opener")

    monkeypatch.setattr(app_logging.subprocess, "run", boom)
    monkeypatch.setattr(app_logging.os, "startfile", boom, raising=False)

    assert app_logging.open_log_directory(str(tmp_path)) is False


def test_log_directory_is_app_specific() -> None:
    assert "giviewer" in app_logging.get_log_directory().lower()
