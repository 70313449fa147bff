# src/focustasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import add_from_text, registry as command_registry, render_all
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console line -> reply text.

    Slash commands go to the registry; anything else is a new task title.
    Returns None for lines that produce no output.
    """
    if not line:
        return None

    try:
        if line.startswith("/"):
            return command_registry.handle(state, line)
        return add_from_text(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (key=%s).", getattr(state.task_store, "storage_key", "?"))

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "FocusTasks"))
    user_id = str(getattr(getattr(state, "settings", None), "user_id", "")).strip()
    _print_ts(f"[CONSOLE] {app_name} {user_id}".rstrip())
    _print_ts("Type a task title to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_all(state))

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
