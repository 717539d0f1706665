from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventType, Priority


@dataclass(frozen=True)
class Event:
    """Domain entity: a calendar item (exam, assignment, ...). Past dates are allowed."""

    id: str
    user_id: str
    title: str
    date: datetime
    type: EventType
    created_at: datetime
    description: Optional[str] = None
    subject_id: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False


@dataclass(frozen=True)
class EventPatch:
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    type: Optional[EventType] = None
    subject_id: Optional[str] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
