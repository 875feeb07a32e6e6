# src/tasktrail/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore
from .history import UndoHistory


@dataclass
class AppState:
    # Store Settings on the state for easy access in commands/connectors.
    settings: object

    task_store: TaskStore
    history: UndoHistory

    # Guards each mutate-then-record pair and each undo.
    lock: threading.RLock = field(default_factory=threading.RLock)
