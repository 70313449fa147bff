# src/focustasks/view/presenter.py

"""
Pure render pipeline: snapshot -> board -> text/HTML.

Nothing here holds state or touches storage. Titles are user input and
are always emitted as literal text (escaped for HTML).
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from dataclasses import dataclass

from ..tasks.summary import format_analytics, summarize
from ..tasks.task_models import Summary, Task


@dataclass(frozen=True, slots=True)
class TaskBoard:
    active: list[Task]
    done: list[Task]
    summary: Summary

    def ordered(self) -> list[Task]:
        """Tasks in display order (active first); positions are 1-based indexes into this."""
        return [*self.active, *self.done]


def build_board(tasks: Iterable[Task]) -> TaskBoard:
    items = [t.copy() for t in tasks]
    return TaskBoard(
        active=[t for t in items if not t.done],
        done=[t for t in items if t.done],
        summary=summarize(items),
    )


def escape_html(text: object) -> str:
    # html.escape emits &#x27; for the single quote; keep the &#39; form.
    return html.escape(str(text), quote=True).replace("&#x27;", "&#39;")


def render_task_line(task: Task, position: int) -> str:
    mark = "x" if task.done else " "
    return f"{position:>3}. [{mark}] {task.title}  ({task.id})"


def render_board_text(board: TaskBoard) -> str:
    lines: list[str] = []
    position = 1

    lines.append(f"Active ({len(board.active)}):")
    if not board.active:
        lines.append("  (none)")
    for t in board.active:
        lines.append(render_task_line(t, position))
        position += 1

    lines.append(f"Done ({len(board.done)}):")
    if not board.done:
        lines.append("  (none)")
    for t in board.done:
        lines.append(render_task_line(t, position))
        position += 1

    lines.append(format_analytics(board.summary))
    return "\n".join(lines)


def _render_html_items(tasks: list[Task]) -> list[str]:
    out: list[str] = []
    for t in tasks:
        checked = " checked" if t.done else ""
        out.append(
            f'    <li class="task" data-id="{escape_html(t.id)}">'
            f'<input type="checkbox" class="task-toggle" aria-label="{escape_html(t.title)}"{checked} disabled> '
            f'<span class="title">{escape_html(t.title)}</span></li>'
        )
    return out


def render_board_html(board: TaskBoard, title: str = "FocusTasks") -> str:
    """Standalone HTML document for a board (read-only export)."""
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{escape_html(title)}</title>",
        "</head>",
        "<body>",
        f"  <h1>{escape_html(title)}</h1>",
        f'  <p id="analytics">{escape_html(format_analytics(board.summary))}</p>',
        "  <h2>Active</h2>",
        '  <ul id="active-list">',
        *_render_html_items(board.active),
        "  </ul>",
        "  <h2>Done</h2>",
        '  <ul id="done-list">',
        *_render_html_items(board.done),
        "  </ul>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(lines)
