# src/tasktrail/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

UndoHistory replays inverses through this Protocol instead of the concrete
TaskStore, so tests can hand it a fake store.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    # Undo inverses
    def delete_by_id(self, task_id: int) -> Any | None: ...
    def set_completed(self, task_id: int, completed: bool) -> bool: ...
    def reinsert(self, task_id: int, description: str, completed: bool) -> Any: ...
