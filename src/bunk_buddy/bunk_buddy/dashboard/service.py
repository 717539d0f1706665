from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.calculator.base import AttendanceCalculator
from ..attendance.calculator.standard_calculator import StandardAttendanceCalculator
from ..core.constants import DASHBOARD_UPCOMING_LIMIT
from ..events.repository import EventRepository
from ..groups.repository import GroupMemberRepository, GroupRepository
from ..subjects.repository import SubjectRepository


@dataclass(frozen=True)
class DashboardStats:
    overall_attendance: float
    safe_to_bunk: int
    upcoming_events: int
    group_count: int
    group_members: int


class DashboardService:
    """Aggregates figures for the dashboard stat cards."""

    def __init__(
        self,
        subjects: SubjectRepository,
        events: EventRepository,
        groups: GroupRepository,
        members: GroupMemberRepository,
        *,
        calculator: Optional[AttendanceCalculator] = None,
    ):
        self._subjects = subjects
        self._events = events
        self._groups = groups
        self._members = members
        self._calculator = calculator or StandardAttendanceCalculator()

    def build_stats(self, user_id: str) -> DashboardStats:
        subjects = self._subjects.list_by_user(user_id)

        # Pooled over all lectures, not an average of per-subject percentages.
        total_lectures = sum(s.total_lectures for s in subjects)
        total_attended = sum(s.attended_lectures for s in subjects)
        overall = total_attended / total_lectures * 100 if total_lectures > 0 else 0.0

        safe_to_bunk = sum(
            self._calculator.calculate(s.attended_lectures, s.total_lectures, s.required_percentage).can_bunk
            for s in subjects
        )

        groups = self._groups.list_by_user(user_id)
        return DashboardStats(
            overall_attendance=round(overall, 1),
            safe_to_bunk=safe_to_bunk,
            upcoming_events=len(self._events.list_upcoming(user_id, DASHBOARD_UPCOMING_LIMIT)),
            group_count=len(groups),
            group_members=sum(len(self._members.list_by_group(g.id)) for g in groups),
        )
