from .presenter import (
    TaskBoard,
    build_board,
    escape_html,
    render_board_html,
    render_board_text,
    render_task_line,
)

__all__ = [
    "TaskBoard",
    "build_board",
    "escape_html",
    "render_board_html",
    "render_board_text",
    "render_task_line",
]
