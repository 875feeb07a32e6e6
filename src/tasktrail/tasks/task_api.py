# src/tasktrail/tasks/task_api.py

"""
Task operations as seen by the command layer.

Every mutating helper applies the change to state.task_store and, only when
the store actually changed, records the matching undo action. Both steps run
under state.lock so an undo never observes one without the other.
"""

from __future__ import annotations

import logging

from ..core.actions import AddAction, CompleteAction, RemoveAction
from ..core.history import UndoOutcome
from ..core.state import AppState
from .task_models import CompleteResult, RemoveResult, TaskSnapshot

logger = logging.getLogger(__name__)


def add_task(state: AppState, description: str) -> int:
    with state.lock:
        task_id = state.task_store.add(description)
        state.history.record(AddAction(task_id))
    logger.info("Task added id=%s", task_id)
    return task_id


def list_tasks(state: AppState) -> list[TaskSnapshot]:
    with state.lock:
        return state.task_store.list()


def complete_task(state: AppState, task_id: int) -> CompleteResult:
    with state.lock:
        result = state.task_store.complete(task_id)
        # Re-completing is a no-op and gets no history entry.
        if result.toggled:
            state.history.record(CompleteAction(task_id, result.previous_completed))
    logger.info("Complete task id=%s -> %s", task_id, result.status)
    return result


def remove_task(state: AppState, task_id: int) -> RemoveResult:
    with state.lock:
        result = state.task_store.remove(task_id)
        if result.removed is not None:
            removed = result.removed
            state.history.record(
                RemoveAction(removed.id, removed.description, removed.completed)
            )
    logger.info("Remove task id=%s found=%s", task_id, result.found)
    return result


def undo_last(state: AppState) -> UndoOutcome:
    with state.lock:
        outcome = state.history.undo(state.task_store)
    logger.info("Undo -> %s kind=%s task_id=%s", outcome.status, outcome.kind, outcome.task_id)
    return outcome
