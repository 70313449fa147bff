# src/focustasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on a KeyValueStore Protocol instead of a concrete
database, and the front end depends on TaskRepo instead of TaskStore.
This keeps storage swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Snapshot, Task


class KeyValueStore(Protocol):
    """Durable key -> UTF-8 text store (a localStorage-style API)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskRepo(Protocol):
    """The four operations the presentation layer may use."""

    def add(self, task: Task) -> Snapshot: ...
    def toggle(self, task_id: str) -> Snapshot: ...
    def remove(self, task_id: str) -> Snapshot: ...
    def list(self) -> Snapshot: ...
