# src/focustasks/errors.py

from __future__ import annotations


class FocusTasksError(Exception):
    """Base class for FocusTasks errors."""


class HydrationError(FocusTasksError):
    """Persisted task data could not be read or decoded."""


class PersistenceError(FocusTasksError):
    """Task data could not be serialized or written to storage."""


class StorageQuotaError(PersistenceError):
    """A value is larger than the storage quota allows."""

    def __init__(self, key: str, size: int, quota: int) -> None:
        super().__init__(f"value for {key!r} is {size} bytes, quota is {quota} bytes")
        self.key = key
        self.size = size
        self.quota = quota
