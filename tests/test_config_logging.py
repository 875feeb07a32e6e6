# tests/test_config_logging.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrail.config import Settings
from tasktrail.logging_setup import _ConsoleNoiseFilter, setup_logging


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TASKTRAIL_APP_NAME",
        "TASKTRAIL_LOG_LEVEL",
        "TASKTRAIL_LOG_TO_FILE",
        "TASKTRAIL_TIMESTAMPS",
        "TASKTRAIL_DATA_DIR",
        "TASKTRAIL_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "tasktrail"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.timestamps is False
    assert s.data_dir == Path(".local/tasktrail")
    assert s.log_dir == s.data_dir


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRAIL_APP_NAME", "todo")
    monkeypatch.setenv("TASKTRAIL_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKTRAIL_LOG_TO_FILE", "yes")
    monkeypatch.setenv("TASKTRAIL_TIMESTAMPS", "off")
    monkeypatch.setenv("TASKTRAIL_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKTRAIL_LOG_DIR", raising=False)

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True
    assert s.timestamps is False
    assert s.log_dir == tmp_path


@pytest.mark.parametrize(
    ("name", "level", "expected"),
    [
        ("tasktrail.tasks.task_store", logging.DEBUG, True),
        ("tasktrail", logging.INFO, True),
        ("py.warnings", logging.WARNING, False),
        ("urllib3", logging.WARNING, False),
        ("urllib3", logging.ERROR, True),
    ],
)
def test_console_noise_filter(name: str, level: int, expected: bool) -> None:
    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is expected


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", log_to_file=True)
        assert log_file == tmp_path / "logs" / "tasktrail.log"
        logging.getLogger("tasktrail.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_console_only(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        assert setup_logging(log_dir=tmp_path / "nolog") is None
        assert not (tmp_path / "nolog").exists()
        assert len(root.handlers) == 1
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
