# src/tasktrail/tasks/task_store.py

from __future__ import annotations

import logging

from .task_models import CompleteResult, CompleteStatus, RemoveResult, Task, TaskSnapshot

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    Ordering:
    - tasks are kept in insertion order (dict order)
    - removing a task keeps the relative order of the others
    - reinsert() appends at the tail; the original position is not restored

    Ids:
    - add() hands out next_id and increments it
    - next_id is always greater than every id ever issued, reinserted ids included
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        logger.debug("TaskStore ready next_id=%s", self._next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    # ---- public API ----

    def add(self, description: str) -> int:
        task_id = self._next_id
        self._next_id += 1
        self._tasks[task_id] = Task(id=task_id, description=description)
        logger.debug("Task added id=%s next_id=%s", task_id, self._next_id)
        return task_id

    def list(self) -> list[TaskSnapshot]:
        return [t.snapshot() for t in self._tasks.values()]

    def get(self, task_id: int) -> TaskSnapshot | None:
        task = self._tasks.get(task_id)
        return task.snapshot() if task is not None else None

    def complete(self, task_id: int) -> CompleteResult:
        task = self._tasks.get(task_id)
        if task is None:
            return CompleteResult(CompleteStatus.NOT_FOUND, task_id)
        if task.completed:
            return CompleteResult(CompleteStatus.ALREADY_COMPLETED, task_id, previous_completed=True)

        task.completed = True
        logger.debug("Task completed id=%s", task_id)
        return CompleteResult(CompleteStatus.TOGGLED, task_id, previous_completed=False)

    def remove(self, task_id: int) -> RemoveResult:
        task = self._tasks.pop(task_id, None)
        if task is None:
            return RemoveResult(task_id)
        logger.debug("Task removed id=%s", task_id)
        return RemoveResult(task_id, removed=task.snapshot())

    # ---- undo-only API ----

    def reinsert(self, task_id: int, description: str, completed: bool) -> TaskSnapshot:
        """
        Put a removed task back with its exact id, at the tail.

        If a live task already holds the id it is replaced in place.
        """
        task_id = int(task_id)
        if task_id in self._tasks:
            logger.warning("reinsert: id=%s already present, replacing", task_id)
        self._tasks[task_id] = Task(id=task_id, description=description, completed=bool(completed))
        if self._next_id <= task_id:
            self._next_id = task_id + 1
        logger.debug("Task reinserted id=%s next_id=%s", task_id, self._next_id)
        return self._tasks[task_id].snapshot()

    def delete_by_id(self, task_id: int) -> TaskSnapshot | None:
        """Remove unconditionally. Returns None if the task was not there."""
        task = self._tasks.pop(task_id, None)
        if task is None:
            logger.warning("delete_by_id: id=%s not found", task_id)
            return None
        logger.debug("Task deleted id=%s", task_id)
        return task.snapshot()

    def set_completed(self, task_id: int, completed: bool) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            return False
        task.completed = bool(completed)
        return True

    def clear(self) -> None:
        total = len(self._tasks)
        self._tasks.clear()
        self._next_id = 1
        logger.info("TaskStore cleared (%d tasks released).", total)
