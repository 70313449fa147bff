# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from focustasks.errors import PersistenceError, StorageQuotaError
from focustasks.storage.kv_store import SQLiteKVStore


def test_get_set_overwrite_remove(tmp_path: Path) -> None:
    kv = SQLiteKVStore(tmp_path / "kv.sqlite3")

    assert kv.get_item("k") is None

    kv.set_item("k", "one")
    assert kv.get_item("k") == "one"

    kv.set_item("k", "два")
    assert kv.get_item("k") == "два"

    kv.remove_item("k")
    assert kv.get_item("k") is None

    # removing a missing key is fine
    kv.remove_item("k")


def test_values_survive_a_new_instance(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "kv.sqlite3"
    SQLiteKVStore(db).set_item("focustasks_1", "[]")

    assert db.exists()
    assert SQLiteKVStore(db).get_item("focustasks_1") == "[]"


def test_quota_counts_utf8_bytes(tmp_path: Path) -> None:
    kv = SQLiteKVStore(tmp_path / "kv.sqlite3", quota_bytes=4)

    kv.set_item("k", "abcd")
    with pytest.raises(StorageQuotaError) as exc_info:
        kv.set_item("k", "ééé")  # 6 bytes

    assert isinstance(exc_info.value, PersistenceError)
    assert exc_info.value.size == 6
    assert kv.get_item("k") == "abcd"


def test_zero_quota_means_unlimited(tmp_path: Path) -> None:
    kv = SQLiteKVStore(tmp_path / "kv.sqlite3", quota_bytes=0)
    kv.set_item("k", "x" * 100_000)
    assert len(kv.get_item("k") or "") == 100_000
