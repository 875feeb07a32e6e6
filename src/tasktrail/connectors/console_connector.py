# src/tasktrail/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import is_exit_choice, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> None:
    """
    Numbered-menu REPL. Returns on the exit choice, EOF or Ctrl+C.

    Each reply from the command layer is printed; nothing is silently dropped.
    """
    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "tasktrail"))
    timestamps = bool(getattr(settings, "timestamps", False))

    def emit(text: str) -> None:
        output(f"[{_ts_local()}] {text}" if timestamps else text)

    def ask(prompt: str) -> str | None:
        try:
            return input_fn(prompt)
        except EOFError:
            return None

    logger.info("Console connector started.")
    menu = command_registry.build_menu(f"{app_name} - Task Manager")

    while True:
        output(menu)
        try:
            line = input_fn("Choose an option: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output("")
            break

        if not line:
            continue

        if is_exit_choice(line):
            logger.info("Console exit command received.")
            emit("Leaving the task manager. See you!")
            break

        try:
            reply = command_registry.handle(state, line, ask)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt during command, exiting.")
            output("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            emit(reply)

    logger.info("Console connector finished.")
