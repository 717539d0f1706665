from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.constants import DEFAULT_UPCOMING_LIMIT
from ..core.enums import EventType, Priority
from .model import Event, EventPatch


class EventRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[Event]:
        raise NotImplementedError

    def list_upcoming(self, user_id: str, limit: int = DEFAULT_UPCOMING_LIMIT) -> Sequence[Event]:
        """Events dated strictly after now, soonest first, at most `limit`."""

        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, event_id: str, patch: EventPatch) -> Optional[Event]:
        raise NotImplementedError

    def delete(self, event_id: str) -> bool:
        raise NotImplementedError
