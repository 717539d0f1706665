from __future__ import annotations

import csv
import io
import logging
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_bool, require_non_empty
from ..core.constants import DEFAULT_TIMETABLE_NAME
from ..core.exceptions import ValidationError
from .model import Schedule, Timetable, TimetablePatch, TimetableSlot
from .repository import TimetableRepository

logger = logging.getLogger(__name__)


def parse_schedule(raw: Any) -> Schedule:
    """Turn a JSON schedule ({day: [{time, subject, ...}]}) into slots."""
    if not isinstance(raw, dict):
        raise ValidationError("Schedule must map weekdays to lists of slots")

    schedule: dict[str, list[TimetableSlot]] = {}
    for day, slots in raw.items():
        day = require_non_empty(day, "Weekday")
        if not isinstance(slots, list):
            raise ValidationError(f"Schedule for {day} must be a list")
        parsed = []
        for slot in slots:
            if not isinstance(slot, dict):
                raise ValidationError(f"Schedule entry for {day} must be an object")
            parsed.append(
                TimetableSlot(
                    time=require_non_empty(slot.get("time"), "Slot time"),
                    subject=require_non_empty(slot.get("subject"), "Slot subject"),
                    type=optional_text(slot.get("type"), "Slot type"),
                    location=optional_text(slot.get("location"), "Slot location"),
                )
            )
        schedule[day] = parsed
    return schedule


def parse_schedule_csv(text: str) -> Schedule:
    """Best-effort `Day,Time,Subject` CSV reader.

    The first line is a header. Rows missing any of the three columns are skipped.
    """
    schedule: dict[str, list[TimetableSlot]] = {}
    reader = csv.reader(io.StringIO(text))
    next(reader, None)
    for row in reader:
        if len(row) < 3:
            continue
        day, time, subject = (c.strip() for c in row[:3])
        if not (day and time and subject):
            continue
        schedule.setdefault(day, []).append(TimetableSlot(time=time, subject=subject))
    return schedule


class TimetableService:
    def __init__(self, timetables: TimetableRepository):
        self._timetables = timetables

    def list_for_user(self, user_id: str) -> Sequence[Timetable]:
        return self._timetables.list_by_user(user_id)

    def active(self, user_id: str) -> Optional[Timetable]:
        return self._timetables.get_active(user_id)

    def create(self, *, user_id: str, name: str, schedule: Any, is_active: Optional[bool] = None) -> Timetable:
        return self._timetables.create(
            user_id=user_id,
            name=require_non_empty(name, "Timetable name"),
            schedule=parse_schedule(schedule),
            is_active=require_bool(is_active, "Active") if is_active is not None else None,
        )

    def update(
        self,
        timetable_id: str,
        *,
        name: Optional[str] = None,
        schedule: Any = None,
        is_active: Optional[bool] = None,
    ) -> Optional[Timetable]:
        patch = TimetablePatch(
            name=require_non_empty(name, "Timetable name") if name is not None else None,
            schedule=parse_schedule(schedule) if schedule is not None else None,
            is_active=require_bool(is_active, "Active") if is_active is not None else None,
        )
        return self._timetables.update(timetable_id, patch)

    def import_csv(self, *, user_id: str, filename: Optional[str], text: str) -> Timetable:
        schedule = parse_schedule_csv(text)
        timetable = self._timetables.create(
            user_id=user_id,
            name=(filename or "").strip() or DEFAULT_TIMETABLE_NAME,
            schedule=schedule,
            is_active=True,
        )
        logger.info("Imported timetable %s with %d weekdays", timetable.id, len(schedule))
        return timetable
