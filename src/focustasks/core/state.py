# src/focustasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import KeyValueStore, TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: object

    kv: KeyValueStore
    task_store: TaskRepo
