# src/focustasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
import threading

from ..core.ports import KeyValueStore
from ..errors import HydrationError, PersistenceError
from .task_models import Snapshot, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owner of one task list and its persisted copy under a single storage key.

    State:
    - the collection lives only in this instance (no module-level list)
    - insertion order is preserved; toggle/remove never reorder
    - duplicate ids are not rejected; keeping ids unique is the caller's job

    Persistence is best-effort:
    - construction never raises; unreadable data means an empty list
    - every mutation rewrites the whole list; a failed write is logged and
      the in-memory state remains authoritative for the session

    Thread-safety:
    - one lock guards read-modify-persist and snapshot copies
    """

    def __init__(self, storage_key: str, kv: KeyValueStore) -> None:
        self._storage_key = storage_key
        self._kv = kv
        self._lock = threading.Lock()
        self._tasks: list[Task] = []

        try:
            self._tasks = self._hydrate()
        except HydrationError as e:
            logger.warning("Failed to hydrate store key=%s: %s", storage_key, e)
            self._tasks = []

        logger.info("TaskStore ready key=%s total=%d", storage_key, len(self._tasks))

    @property
    def storage_key(self) -> str:
        return self._storage_key

    # ---- persistence ----

    def _hydrate(self) -> list[Task]:
        try:
            raw = self._kv.get_item(self._storage_key)
        except Exception as e:
            raise HydrationError(f"storage read failed: {e}") from e

        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise HydrationError(f"invalid JSON: {e}") from e

        if not isinstance(parsed, list):
            raise HydrationError(f"expected a list, got {type(parsed).__name__}")

        tasks: list[Task] = []
        dropped = 0
        for record in parsed:
            task = Task.from_record(record)
            if task is None:
                dropped += 1
                continue
            tasks.append(task)

        if dropped:
            logger.warning(
                "Discarded %d malformed task record(s) from key=%s", dropped, self._storage_key
            )
        return tasks

    def _write(self) -> None:
        try:
            payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"serialization failed: {e}") from e

        try:
            self._kv.set_item(self._storage_key, payload)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"storage write failed: {e}") from e

    def _persist(self) -> bool:
        try:
            self._write()
        except PersistenceError:
            logger.exception("Failed to persist store key=%s", self._storage_key)
            return False
        return True

    def _snapshot(self) -> Snapshot:
        return [t.copy() for t in self._tasks]

    # ---- public API ----

    def add(self, task: Task) -> Snapshot:
        with self._lock:
            self._tasks = [*self._tasks, Task(id=task.id, title=task.title, done=bool(task.done))]
            self._persist()
            logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
            return self._snapshot()

    def toggle(self, task_id: str) -> Snapshot:
        with self._lock:
            self._tasks = [
                Task(id=t.id, title=t.title, done=not t.done) if t.id == task_id else t
                for t in self._tasks
            ]
            self._persist()
            logger.debug("Task toggled id=%s", task_id)
            return self._snapshot()

    def remove(self, task_id: str) -> Snapshot:
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id != task_id]
            self._persist()
            logger.debug("Task removed id=%s dropped=%d", task_id, before - len(self._tasks))
            return self._snapshot()

    def list(self) -> Snapshot:
        with self._lock:
            return self._snapshot()


def create_store(storage_key: str, kv: KeyValueStore) -> TaskStore:
    """Build a TaskStore hydrated from ``kv`` under ``storage_key``."""
    return TaskStore(storage_key, kv)
