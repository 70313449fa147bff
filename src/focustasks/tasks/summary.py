# src/focustasks/tasks/summary.py

from __future__ import annotations

import math
from collections.abc import Iterable

from .task_models import Summary, Task


def summarize(tasks: Iterable[Task]) -> Summary:
    """
    Count active/done tasks and the completion percentage.

    pct is rounded half-up to one decimal; it is 0 for an empty list.
    Pure: no storage access, the input is not modified.
    """
    active = 0
    done = 0
    for t in tasks:
        if t.done:
            done += 1
        else:
            active += 1

    total = active + done
    pct: float = 0 if total == 0 else math.floor(done / total * 1000 + 0.5) / 10
    return Summary(active=active, done=done, pct=pct)


def format_analytics(summary: Summary) -> str:
    return f"Active: {summary.active} · Done: {summary.done} · Done %: {summary.pct:.1f}%"
