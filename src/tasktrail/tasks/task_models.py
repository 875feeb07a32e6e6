# src/tasktrail/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(slots=True)
class Task:
    """Live task record. Only TaskStore holds these."""

    id: int
    description: str
    completed: bool = False

    def snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(id=self.id, description=self.description, completed=self.completed)


@dataclass(frozen=True, slots=True)
class TaskSnapshot:
    """Read-only copy handed out by the store (list/get/remove)."""

    id: int
    description: str
    completed: bool


class CompleteStatus(StrEnum):
    TOGGLED = "toggled"
    ALREADY_COMPLETED = "already_completed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class CompleteResult:
    """
    Outcome of TaskStore.complete().

    previous_completed is only meaningful for TOGGLED (always False there);
    the caller records it in the undo history.
    """

    status: CompleteStatus
    task_id: int
    previous_completed: bool = False

    @property
    def toggled(self) -> bool:
        return self.status is CompleteStatus.TOGGLED


@dataclass(frozen=True, slots=True)
class RemoveResult:
    task_id: int
    removed: TaskSnapshot | None = None

    @property
    def found(self) -> bool:
        return self.removed is not None
