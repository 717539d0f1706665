from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import optional_text, require_bool, require_choice, require_non_empty
from ..core.constants import DEFAULT_UPCOMING_LIMIT
from ..core.enums import EventType, Priority
from ..core.exceptions import ValidationError
from .model import Event, EventPatch
from .repository import EventRepository


class EventService:
    """Use case: manage the exam/assignment calendar."""

    def __init__(self, events: EventRepository):
        self._events = events

    def list_for_user(self, user_id: str) -> Sequence[Event]:
        return self._events.list_by_user(user_id)

    def upcoming(self, user_id: str, *, limit: int = DEFAULT_UPCOMING_LIMIT) -> Sequence[Event]:
        if limit < 1:
            raise ValidationError("Limit must be at least 1")
        return self._events.list_upcoming(user_id, limit)

    def get(self, event_id: str) -> Optional[Event]:
        return self._events.get_by_id(event_id)

    def create(
        self,
        *,
        user_id: str,
        title: str,
        date: Any,
        type: Any,
        description: Optional[str] = None,
        subject_id: Optional[str] = None,
        priority: Any = None,
        completed: Optional[bool] = None,
    ) -> Event:
        return self._events.create(
            user_id=user_id,
            title=require_non_empty(title, "Title"),
            date=parse_iso_datetime(date, "Date"),
            type=require_choice(type, EventType, "Type"),
            description=optional_text(description, "Description"),
            subject_id=optional_text(subject_id, "Subject"),
            priority=require_choice(priority, Priority, "Priority") if priority is not None else None,
            completed=require_bool(completed, "Completed") if completed is not None else None,
        )

    def update(
        self,
        event_id: str,
        *,
        title: Optional[str] = None,
        date: Any = None,
        type: Any = None,
        description: Optional[str] = None,
        subject_id: Optional[str] = None,
        priority: Any = None,
        completed: Optional[bool] = None,
    ) -> Optional[Event]:
        patch = EventPatch(
            title=require_non_empty(title, "Title") if title is not None else None,
            date=parse_iso_datetime(date, "Date") if date is not None else None,
            type=require_choice(type, EventType, "Type") if type is not None else None,
            description=optional_text(description, "Description"),
            subject_id=optional_text(subject_id, "Subject"),
            priority=require_choice(priority, Priority, "Priority") if priority is not None else None,
            completed=require_bool(completed, "Completed") if completed is not None else None,
        )
        return self._events.update(event_id, patch)

    def delete(self, event_id: str) -> bool:
        return self._events.delete(event_id)
