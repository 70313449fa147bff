# src/focustasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.state import AppState
from ..tasks.summary import format_analytics, summarize
from ..tasks.task_api import new_task
from ..tasks.task_models import Task
from ..view.presenter import build_board, render_board_html, render_board_text

# (state, args, rest-of-line) -> reply
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].strip().partition(" ")
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        rest = rest.strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest.split(), rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text (no leading /) adds a task.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_all(state: AppState) -> str:
    """Full board: active list, done list, analytics line."""
    return render_board_text(build_board(state.task_store.list()))


def resolve_task_ref(state: AppState, ref: str) -> Task | None:
    """
    Find a task by id, or by 1-based position in the displayed board
    (active tasks first, then done).
    """
    ordered = build_board(state.task_store.list()).ordered()
    for t in ordered:
        if t.id == ref:
            return t
    if ref.isdigit():
        idx = int(ref)
        if 1 <= idx <= len(ordered):
            return ordered[idx - 1]
    return None


def add_from_text(state: AppState, text: str) -> str:
    try:
        task = new_task(text)
    except ValueError as e:
        return str(e)
    state.task_store.add(task)
    logger.debug("Console add id=%s", task.id)
    return render_all(state)


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    return add_from_text(state, rest)


def cmd_toggle(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /toggle <id or #>."
    task = resolve_task_ref(state, args[0])
    if task is None:
        return f"No task matches {args[0]!r}."
    state.task_store.toggle(task.id)
    return render_all(state)


def cmd_remove(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /rm <id or #>."
    task = resolve_task_ref(state, args[0])
    if task is None:
        return f"No task matches {args[0]!r}."
    state.task_store.remove(task.id)
    return render_all(state)


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    return render_all(state)


def cmd_stats(state: AppState, args: list[str], rest: str) -> str:
    return format_analytics(summarize(state.task_store.list()))


def cmd_export(state: AppState, args: list[str], rest: str) -> str:
    """
    /export <path>  -> write the board as an HTML file
    """
    if not rest:
        return "Usage: /export <path>."

    path = Path(rest).expanduser()
    app_name = str(getattr(state.settings, "app_name", "FocusTasks"))
    user_id = str(getattr(state.settings, "user_id", "")).strip()
    title = f"{app_name} {user_id}".strip()

    html = render_board_html(build_board(state.task_store.list()), title=title)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, "utf-8")
    except OSError:
        logger.exception("Failed to export board to %s", path)
        return f"Could not write {path}."

    logger.info("Exported board to %s", path)
    return f"Exported to {path}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark done/undone: /toggle <id or #>.", aliases=["done", "x"]
)
registry.register(
    "rm", cmd_remove, help_text="Delete a task: /rm <id or #>.", aliases=["del", "delete"]
)
registry.register("list", cmd_list, help_text="Show active and done tasks.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show counts and completion percentage.")
registry.register("export", cmd_export, help_text="Write the board as HTML: /export <path>.")
