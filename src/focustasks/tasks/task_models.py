# src/focustasks/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from typing import Any


@dataclass(slots=True)
class Task:
    id: str
    title: str
    done: bool = False

    def copy(self) -> Task:
        return replace(self)

    def to_record(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Any) -> Task | None:
        """
        Validate and coerce one persisted record.

        Returns None when the record cannot be turned into a Task:
        - not a mapping
        - id missing or not a str/int
        - title missing
        """
        if not isinstance(record, Mapping):
            return None

        raw_id = record.get("id")
        # bool is an int subclass; "True" is not a usable id.
        if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)):
            return None

        raw_title = record.get("title")
        if raw_title is None or isinstance(raw_title, (Mapping, list)):
            return None

        return cls(id=str(raw_id), title=str(raw_title), done=bool(record.get("done")))


# An independent copy of the task collection at call time.
Snapshot = list[Task]


@dataclass(frozen=True, slots=True)
class Summary:
    active: int
    done: int
    pct: float

    @property
    def total(self) -> int:
        return self.active + self.done
