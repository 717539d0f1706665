from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Sequence


@dataclass(frozen=True)
class TimetableSlot:
    time: str
    subject: str
    type: Optional[str] = None
    location: Optional[str] = None


# Weekday name -> slots in display order.
Schedule = Mapping[str, Sequence[TimetableSlot]]


@dataclass(frozen=True)
class Timetable:
    """Domain entity: a weekly timetable.

    Several timetables of one user may be active at once; `get_active` picks
    the first in insertion order.
    """

    id: str
    user_id: str
    name: str
    schedule: Schedule
    created_at: datetime
    is_active: bool = True


@dataclass(frozen=True)
class TimetablePatch:
    name: Optional[str] = None
    schedule: Optional[Schedule] = None
    is_active: Optional[bool] = None
