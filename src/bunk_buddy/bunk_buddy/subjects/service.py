from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..attendance.bunkometer import get_bunkometer_status
from ..attendance.calculator.base import AttendanceCalculator
from ..attendance.calculator.standard_calculator import StandardAttendanceCalculator
from ..attendance.model import AttendanceCalculation, BunkometerStatus
from ..common.validators import (
    optional_text,
    require_non_empty,
    require_non_negative_int,
    require_percentage,
)
from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE
from .model import Subject, SubjectPatch
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectAttendance:
    subject: Subject
    calculation: AttendanceCalculation
    bunkometer: BunkometerStatus


class SubjectService:
    """Use case: keep lecture counts per subject and report attendance."""

    def __init__(self, subjects: SubjectRepository, *, calculator: Optional[AttendanceCalculator] = None):
        self._subjects = subjects
        self._calculator = calculator or StandardAttendanceCalculator()

    def list_for_user(self, user_id: str) -> Sequence[Subject]:
        return self._subjects.list_by_user(user_id)

    def get(self, subject_id: str) -> Optional[Subject]:
        return self._subjects.get_by_id(subject_id)

    def create(
        self,
        *,
        user_id: str,
        name: str,
        total_lectures: Optional[int] = None,
        attended_lectures: Optional[int] = None,
        required_percentage: Optional[float] = None,
        color: Optional[str] = None,
    ) -> Subject:
        name = require_non_empty(name, "Subject name")
        if total_lectures is not None:
            require_non_negative_int(total_lectures, "Total lectures")
        if attended_lectures is not None:
            require_non_negative_int(attended_lectures, "Attended lectures")
        if required_percentage is not None:
            require_percentage(required_percentage, "Required percentage")

        subject = self._subjects.create(
            user_id=user_id,
            name=name,
            total_lectures=total_lectures,
            attended_lectures=attended_lectures,
            required_percentage=required_percentage,
            color=optional_text(color, "Color"),
        )
        logger.info("Created subject %s for user %s", subject.id, user_id)
        return subject

    def update(
        self,
        subject_id: str,
        *,
        name: Optional[str] = None,
        total_lectures: Optional[int] = None,
        attended_lectures: Optional[int] = None,
        required_percentage: Optional[float] = None,
        color: Optional[str] = None,
    ) -> Optional[Subject]:
        if name is not None:
            name = require_non_empty(name, "Subject name")
        if total_lectures is not None:
            require_non_negative_int(total_lectures, "Total lectures")
        if attended_lectures is not None:
            require_non_negative_int(attended_lectures, "Attended lectures")
        if required_percentage is not None:
            require_percentage(required_percentage, "Required percentage")

        patch = SubjectPatch(
            name=name,
            total_lectures=total_lectures,
            attended_lectures=attended_lectures,
            required_percentage=required_percentage,
            color=optional_text(color, "Color"),
        )
        return self._subjects.update(subject_id, patch)

    def delete(self, subject_id: str) -> bool:
        deleted = self._subjects.delete(subject_id)
        if deleted:
            logger.info("Deleted subject %s", subject_id)
        return deleted

    def calculate(
        self,
        attended: int,
        total: int,
        required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE,
    ) -> AttendanceCalculation:
        return self._calculator.calculate(attended, total, required_percentage)

    def attendance_for(self, subject: Subject) -> SubjectAttendance:
        calc = self.calculate(subject.attended_lectures, subject.total_lectures, subject.required_percentage)
        return SubjectAttendance(
            subject=subject,
            calculation=calc,
            bunkometer=get_bunkometer_status(calc.current_percentage, subject.required_percentage),
        )
