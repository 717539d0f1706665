from __future__ import annotations

import math

from ...core.constants import DEFAULT_REQUIRED_PERCENTAGE, WARNING_MARGIN
from ...core.enums import AttendanceStatus
from ..model import AttendanceCalculation
from .base import AttendanceCalculator


def classify_attendance(percentage: float, required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE) -> AttendanceStatus:
    """Three-way zone decision shared by every attendance classifier."""
    if percentage < required_percentage:
        return AttendanceStatus.DANGER
    if percentage < required_percentage + WARNING_MARGIN:
        return AttendanceStatus.WARNING
    return AttendanceStatus.SAFE


def required_lectures(total: int, required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE) -> int:
    # Multiply before dividing: 28 / 100 * 25 is 7.000000000000001 in floats.
    return math.ceil(required_percentage * total / 100)


class StandardAttendanceCalculator(AttendanceCalculator):
    """Standard rule: required lectures round up, margins never go below 0."""

    def calculate(
        self,
        attended: int,
        total: int,
        required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE,
    ) -> AttendanceCalculation:
        current_percentage = (attended / total) * 100 if total > 0 else 0.0
        needed = required_lectures(total, required_percentage)

        return AttendanceCalculation(
            current_percentage=current_percentage,
            can_bunk=max(0, attended - needed),
            must_attend=max(0, needed - attended),
            status=classify_attendance(current_percentage, required_percentage),
        )


_default = StandardAttendanceCalculator()


def calculate_attendance(
    attended: int,
    total: int,
    required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE,
) -> AttendanceCalculation:
    return _default.calculate(attended, total, required_percentage)
