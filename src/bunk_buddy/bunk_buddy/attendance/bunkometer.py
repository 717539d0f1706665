"""Presentation helpers for attendance zones.

All helpers go through `classify_attendance`, so the zone boundaries always
match `AttendanceCalculation.status`.
"""

from __future__ import annotations

from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE
from ..core.enums import AttendanceStatus
from .calculator.standard_calculator import classify_attendance
from .model import BunkometerStatus

_BUNKOMETER = {
    AttendanceStatus.SAFE: BunkometerStatus(
        status="Safe zone",
        color="text-green-600 dark:text-green-400",
        bg_color="bg-green-100 dark:bg-green-900",
    ),
    AttendanceStatus.WARNING: BunkometerStatus(
        status="Warning zone",
        color="text-yellow-600 dark:text-yellow-400",
        bg_color="bg-yellow-100 dark:bg-yellow-900",
    ),
    AttendanceStatus.DANGER: BunkometerStatus(
        status="Danger zone",
        color="text-red-600 dark:text-red-400",
        bg_color="bg-red-100 dark:bg-red-900",
    ),
}

_TEXT_COLOR = {
    AttendanceStatus.SAFE: "text-green-600 dark:text-green-400",
    AttendanceStatus.WARNING: "text-yellow-600 dark:text-yellow-400",
    AttendanceStatus.DANGER: "text-red-600 dark:text-red-400",
}

_PROGRESS_COLOR = {
    AttendanceStatus.SAFE: "bg-green-500",
    AttendanceStatus.WARNING: "bg-yellow-500",
    AttendanceStatus.DANGER: "bg-red-500",
}


def get_bunkometer_status(percentage: float, required: float = DEFAULT_REQUIRED_PERCENTAGE) -> BunkometerStatus:
    return _BUNKOMETER[classify_attendance(percentage, required)]


def get_attendance_color(percentage: float, required: float = DEFAULT_REQUIRED_PERCENTAGE) -> str:
    return _TEXT_COLOR[classify_attendance(percentage, required)]


def get_progress_bar_color(percentage: float, required: float = DEFAULT_REQUIRED_PERCENTAGE) -> str:
    return _PROGRESS_COLOR[classify_attendance(percentage, required)]
