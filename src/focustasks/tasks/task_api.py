# src/focustasks/tasks/task_api.py

"""Caller-side helpers: the store trusts these to supply clean input."""

from __future__ import annotations

import random
import string
import time

from .task_models import Task

BLANK_TITLE_MESSAGE = "Please enter a non-empty task title."

_ID_ALPHABET = string.digits + string.ascii_lowercase


def is_blank(text: str) -> bool:
    return text.strip() == ""


def make_task_id(now: float | None = None) -> str:
    """Fresh id: ``<epoch-ms>_<6 random base36 chars>``."""
    if now is None:
        now = time.time()
    suffix = "".join(random.choices(_ID_ALPHABET, k=6))
    return f"{int(now * 1000)}_{suffix}"


def new_task(title: str | None) -> Task:
    """
    Build a not-done Task from user input.
    Raises ValueError for blank titles; the title is stored trimmed.
    """
    if title is None or is_blank(title):
        raise ValueError(BLANK_TITLE_MESSAGE)
    return Task(id=make_task_id(), title=title.strip(), done=False)
