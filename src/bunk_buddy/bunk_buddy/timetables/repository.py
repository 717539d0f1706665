from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Schedule, Timetable, TimetablePatch


class TimetableRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[Timetable]:
        raise NotImplementedError

    def get_active(self, user_id: str) -> Optional[Timetable]:
        raise NotImplementedError

    def get_by_id(self, timetable_id: str) -> Optional[Timetable]:
        raise NotImplementedError

    def create(self, *, user_id: str, name: str, schedule: Schedule, is_active: Optional[bool] = None) -> Timetable:
        raise NotImplementedError

    def update(self, timetable_id: str, patch: TimetablePatch) -> Optional[Timetable]:
        raise NotImplementedError

    def delete(self, timetable_id: str) -> bool:
        raise NotImplementedError
