# src/tasktrail/core/history.py

"""
Undo history: a plain LIFO stack of actions.

Rules:
- record() pushes; undo() pops exactly one action and applies its inverse
- a popped action is consumed whatever the outcome (applied or inconsistent)
- nothing else reads or rewrites the stack
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .actions import Action, ActionKind, AddAction, CompleteAction, RemoveAction
from .ports import TaskRepo

logger = logging.getLogger(__name__)


class UndoStatus(StrEnum):
    NOTHING_TO_UNDO = "nothing_to_undo"
    APPLIED = "applied"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True, slots=True)
class UndoOutcome:
    status: UndoStatus
    kind: ActionKind | None = None
    task_id: int | None = None
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status is UndoStatus.APPLIED


NOTHING_TO_UNDO = UndoOutcome(UndoStatus.NOTHING_TO_UNDO, message="Nothing to undo.")


def _state_word(completed: bool) -> str:
    return "completed" if completed else "pending"


class UndoHistory:
    def __init__(self) -> None:
        self._stack: list[Action] = []

    def __len__(self) -> int:
        return len(self._stack)

    def record(self, action: Action) -> None:
        self._stack.append(action)
        logger.debug("Recorded %s task_id=%s depth=%d", action.kind, action.task_id, len(self._stack))

    def peek(self) -> Action | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        total = len(self._stack)
        self._stack.clear()
        logger.info("UndoHistory cleared (%d actions released).", total)

    def undo(self, store: TaskRepo) -> UndoOutcome:
        if not self._stack:
            return NOTHING_TO_UNDO

        action = self._stack.pop()
        logger.debug("Undoing %s task_id=%s", action.kind, action.task_id)

        if isinstance(action, AddAction):
            outcome = self._undo_add(store, action)
        elif isinstance(action, CompleteAction):
            outcome = self._undo_complete(store, action)
        elif isinstance(action, RemoveAction):
            outcome = self._undo_remove(store, action)
        else:
            raise TypeError(f"Unknown action type: {type(action).__name__}")

        if outcome.status is UndoStatus.INCONSISTENT:
            logger.warning("Undo inconsistent: %s", outcome.message)
        return outcome

    # ---- inverses ----

    @staticmethod
    def _undo_add(store: TaskRepo, action: AddAction) -> UndoOutcome:
        if store.delete_by_id(action.task_id) is None:
            return UndoOutcome(
                UndoStatus.INCONSISTENT,
                ActionKind.ADD,
                action.task_id,
                f"Undo failed: added task (ID: {action.task_id}) not found for removal.",
            )
        return UndoOutcome(
            UndoStatus.APPLIED,
            ActionKind.ADD,
            action.task_id,
            f"Undone: task (ID: {action.task_id}) removed (it was added).",
        )

    @staticmethod
    def _undo_complete(store: TaskRepo, action: CompleteAction) -> UndoOutcome:
        if not store.set_completed(action.task_id, action.previous_completed):
            return UndoOutcome(
                UndoStatus.INCONSISTENT,
                ActionKind.COMPLETE,
                action.task_id,
                f"Undo failed: completed task (ID: {action.task_id}) not found to revert.",
            )
        return UndoOutcome(
            UndoStatus.APPLIED,
            ActionKind.COMPLETE,
            action.task_id,
            f"Undone: task (ID: {action.task_id}) reverted to "
            f"{_state_word(action.previous_completed)}.",
        )

    @staticmethod
    def _undo_remove(store: TaskRepo, action: RemoveAction) -> UndoOutcome:
        store.reinsert(action.task_id, action.description, action.previous_completed)
        return UndoOutcome(
            UndoStatus.APPLIED,
            ActionKind.REMOVE,
            action.task_id,
            f"Undone: task '{action.description}' (ID: {action.task_id}) added back.",
        )
