# src/tasktrail/core/actions.py

"""
Undo actions.

Each action is a frozen record holding its own copy of what it needs to
reverse one mutation. Nothing here points back into TaskStore.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ActionKind(StrEnum):
    ADD = "add"
    COMPLETE = "complete"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class AddAction:
    task_id: int

    @property
    def kind(self) -> ActionKind:
        return ActionKind.ADD


@dataclass(frozen=True, slots=True)
class CompleteAction:
    task_id: int
    previous_completed: bool

    @property
    def kind(self) -> ActionKind:
        return ActionKind.COMPLETE


@dataclass(frozen=True, slots=True)
class RemoveAction:
    task_id: int
    description: str
    previous_completed: bool

    @property
    def kind(self) -> ActionKind:
        return ActionKind.REMOVE


Action = AddAction | CompleteAction | RemoveAction
