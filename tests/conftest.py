# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from focustasks.core.state import AppState
from focustasks.storage.kv_store import SQLiteKVStore
from focustasks.tasks.task_store import TaskStore

from .fakes import FakeKVStore

STORAGE_KEY = "focustasks_6092"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="FocusTasks",
        log_level="INFO",
        user_id="6092",
        key_prefix="focustasks",
        storage_key=STORAGE_KEY,
        console_enabled=True,
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.sqlite3",
        storage_quota_bytes=0,
    )


@pytest.fixture()
def kv(settings: SimpleNamespace) -> SQLiteKVStore:
    return SQLiteKVStore(settings.storage_path)


@pytest.fixture()
def fake_kv() -> FakeKVStore:
    return FakeKVStore()


@pytest.fixture()
def state(settings: SimpleNamespace, kv: SQLiteKVStore) -> AppState:
    """
    AppState wired with real SQLite storage: the persistence round-trip is
    part of what we want to test.
    """
    return AppState(
        settings=settings,
        kv=kv,
        task_store=TaskStore(settings.storage_key, kv),
    )
