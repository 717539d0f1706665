from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import Schedule, Timetable, TimetablePatch
from .repository import TimetableRepository


class InMemoryTimetableRepository(TimetableRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_by_user(self, user_id: str) -> Sequence[Timetable]:
        return [t for t in self._db.timetables if t.user_id == user_id]

    def get_active(self, user_id: str) -> Optional[Timetable]:
        return next((t for t in self._db.timetables if t.user_id == user_id and t.is_active), None)

    def get_by_id(self, timetable_id: str) -> Optional[Timetable]:
        return self._db.timetables.get(timetable_id)

    def create(self, *, user_id: str, name: str, schedule: Schedule, is_active: Optional[bool] = None) -> Timetable:
        timetable = Timetable(
            id=self._db.next_id(),
            user_id=user_id,
            name=name,
            schedule=schedule,
            is_active=bool(is_active) if is_active is not None else True,
            created_at=self._db.now(),
        )
        return self._db.timetables.insert(timetable)

    def update(self, timetable_id: str, patch: TimetablePatch) -> Optional[Timetable]:
        with self._db.timetables.lock:
            current = self._db.timetables.get(timetable_id)
            if not current:
                return None
            return self._db.timetables.replace(apply_patch(current, patch))

    def delete(self, timetable_id: str) -> bool:
        return self._db.timetables.remove(timetable_id)
