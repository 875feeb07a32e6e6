# src/tasktrail/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and wires
the task store and undo history into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.history import UndoHistory
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        history=UndoHistory(),
    )
    logger.debug("AppState created app=%s", getattr(settings, "app_name", "tasktrail"))
    return state


def shutdown_state(state: AppState) -> None:
    """Release tasks and history. Nothing outlives the process."""
    with state.lock:
        state.history.clear()
        state.task_store.clear()
