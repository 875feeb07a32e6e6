# src/tasktrail/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import CompleteStatus, TaskSnapshot

# Reads one line from the user after showing a prompt. None means EOF.
Ask = Callable[[str], "str | None"]
CommandHandler = Callable[[AppState, list[str], Ask], str]

INVALID_NUMBER = "Invalid input. Please enter a number."
INVALID_OPTION = "Invalid option. Please try again."
EXIT_KEYS = ("0", "exit", "quit")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Numbered menu registry used by the console connector (1 add, 2 list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        in_menu: bool = True,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        if in_menu:
            self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, ask: Ask) -> str | None:
        """
        Handle a menu choice like "3" or "3 12" (inline arguments skip the prompt).
        Returns a reply string, or None for an empty line.
        """
        parts = line.split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]
        if _is_int(name):
            name = str(int(name))

        handler = self._handlers.get(name)
        if handler is None:
            if not _is_int(name):
                return INVALID_NUMBER
            return INVALID_OPTION

        return handler(state, args, ask)

    def build_menu(self, title: str) -> str:
        lines = [f"\n--- {title} ---"]
        for key, help_text in self._help.items():
            lines.append(f"{key}. {help_text}")
        lines.append(f"{EXIT_KEYS[0]}. Exit")
        return "\n".join(lines)


registry = CommandRegistry()


def _is_int(raw: str) -> bool:
    # ASCII digits with an optional sign; int() alone also takes "1_0" and non-ASCII digits.
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    return raw.isascii() and digits.isdigit()


def parse_task_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    raw = raw.strip()
    if not _is_int(raw):
        return None
    return int(raw)


def is_exit_choice(line: str) -> bool:
    parts = line.split()
    if not parts:
        return False
    return parts[0].lower() in EXIT_KEYS or parse_task_id(parts[0]) == 0


def _read_task_id(args: list[str], ask: Ask, prompt: str) -> int | None:
    raw = args[0] if args else ask(prompt)
    return parse_task_id(raw)


def format_task_line(task: TaskSnapshot) -> str:
    mark = "X" if task.completed else " "
    return f"ID: {task.id} | Status: [{mark}] | Description: {task.description}"


def format_task_list(tasks: list[TaskSnapshot]) -> str:
    if not tasks:
        return "No tasks in the list."
    lines = ["--- Task List ---"]
    lines.extend(format_task_line(t) for t in tasks)
    lines.append("-----------------")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str], ask: Ask) -> str:
    if args:
        description = args[0]
    else:
        description = ask("Enter the task description: ")
    if description is None:
        return "Error reading the description."

    description = description.rstrip("\r\n")
    task_id = task_api.add_task(state, description)
    return f"Task '{description}' (ID: {task_id}) added successfully."


def cmd_list(state: AppState, args: list[str], ask: Ask) -> str:
    return format_task_list(task_api.list_tasks(state))


def cmd_complete(state: AppState, args: list[str], ask: Ask) -> str:
    task_id = _read_task_id(args, ask, "Enter the ID of the task to complete: ")
    if task_id is None:
        return INVALID_NUMBER

    result = task_api.complete_task(state, task_id)
    if result.status is CompleteStatus.NOT_FOUND:
        return f"Task with ID {task_id} not found."
    if result.status is CompleteStatus.ALREADY_COMPLETED:
        return f"Task {task_id} is already completed."
    return f"Task {task_id} marked as completed."


def cmd_remove(state: AppState, args: list[str], ask: Ask) -> str:
    task_id = _read_task_id(args, ask, "Enter the ID of the task to remove: ")
    if task_id is None:
        return INVALID_NUMBER

    result = task_api.remove_task(state, task_id)
    if result.removed is None:
        return f"Task with ID {task_id} not found."
    return f"Task {result.removed.id} ('{result.removed.description}') removed successfully."


def cmd_undo(state: AppState, args: list[str], ask: Ask) -> str:
    outcome = task_api.undo_last(state)
    if not outcome.applied:
        return outcome.message
    return f"Undoing the last action...\n{outcome.message}"


def cmd_status(state: AppState, args: list[str], ask: Ask) -> str:
    with state.lock:
        total = state.task_store.count()
        done = sum(1 for t in state.task_store.list() if t.completed)
        next_id = state.task_store.next_id
        depth = len(state.history)
        top = state.history.peek()
    last = f"{top.kind} (ID: {top.task_id})" if top is not None else "none"
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} completed)\n"
        f"  Next ID: {next_id}\n"
        f"  Undo depth: {depth}, last: {last}"
    )


registry.register("1", cmd_add, help_text="Add task", aliases=["add"])
registry.register("2", cmd_list, help_text="List tasks", aliases=["list", "ls"])
registry.register("3", cmd_complete, help_text="Mark task as completed", aliases=["complete", "done"])
registry.register("4", cmd_remove, help_text="Remove task", aliases=["remove", "rm"])
registry.register("5", cmd_undo, help_text="Undo last action", aliases=["undo"])
registry.register("status", cmd_status, help_text="Show status", in_menu=False)
