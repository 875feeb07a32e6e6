# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrail.cli.bootstrap import create_initial_state
from tasktrail.core.state import AppState
from tasktrail.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="tasktrail-test",
        log_level="WARNING",
        log_to_file=False,
        timestamps=False,
        data_dir=tmp_path,
        log_dir=tmp_path,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()
