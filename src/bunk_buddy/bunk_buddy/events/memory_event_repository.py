from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import DEFAULT_UPCOMING_LIMIT
from ..core.enums import EventType, Priority
from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import Event, EventPatch
from .repository import EventRepository


class InMemoryEventRepository(EventRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_by_user(self, user_id: str) -> Sequence[Event]:
        return [e for e in self._db.events if e.user_id == user_id]

    def list_upcoming(self, user_id: str, limit: int = DEFAULT_UPCOMING_LIMIT) -> Sequence[Event]:
        now = self._db.now()
        items = [e for e in self._db.events if e.user_id == user_id and e.date > now]
        items.sort(key=lambda e: e.date)
        return items[: max(limit, 0)]

    def get_by_id(self, event_id: str) -> Optional[Event]:
        return self._db.events.get(event_id)

    def create(
        self,
        *,
        user_id: str,
        title: str,
        date: datetime,
        type: EventType,
        description: Optional[str] = None,
        subject_id: Optional[str] = None,
        priority: Optional[Priority] = None,
        completed: Optional[bool] = None,
    ) -> Event:
        event = Event(
            id=self._db.next_id(),
            user_id=user_id,
            title=title,
            date=date,
            type=type,
            description=description,
            subject_id=subject_id,
            priority=priority or Priority.MEDIUM,
            completed=bool(completed) if completed is not None else False,
            created_at=self._db.now(),
        )
        return self._db.events.insert(event)

    def update(self, event_id: str, patch: EventPatch) -> Optional[Event]:
        with self._db.events.lock:
            current = self._db.events.get(event_id)
            if not current:
                return None
            return self._db.events.replace(apply_patch(current, patch))

    def delete(self, event_id: str) -> bool:
        return self._db.events.remove(event_id)
