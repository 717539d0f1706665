from __future__ import annotations

import threading
from dataclasses import fields, replace
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Insertion-ordered id -> record map guarded by its own lock.

    Records are frozen dataclasses with an ``id`` attribute; updates replace
    the stored object rather than mutating it.
    """

    def __init__(self, name: str):
        self.name = name
        self.lock = threading.RLock()
        self._rows: dict[str, T] = {}

    def insert(self, record: T) -> T:
        with self.lock:
            self._rows[getattr(record, "id")] = record
        return record

    def get(self, record_id: str) -> Optional[T]:
        with self.lock:
            return self._rows.get(record_id)

    def replace(self, record: T) -> T:
        with self.lock:
            self._rows[getattr(record, "id")] = record
        return record

    def remove(self, record_id: str) -> bool:
        with self.lock:
            return self._rows.pop(record_id, None) is not None

    def rows(self) -> list[T]:
        """Snapshot of all records in insertion order."""
        with self.lock:
            return list(self._rows.values())

    def __len__(self) -> int:
        with self.lock:
            return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self.rows())


def apply_patch(record: T, patch: Any) -> T:
    """Shallow-merge the non-None fields of a patch dataclass over a record."""
    changes = {f.name: getattr(patch, f.name) for f in fields(patch) if getattr(patch, f.name) is not None}
    if not changes:
        return record
    return replace(record, **changes)
