from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceCalculation:
    """Attendance figures derived from raw lecture counts."""

    current_percentage: float
    can_bunk: int
    must_attend: int
    status: AttendanceStatus


@dataclass(frozen=True)
class BunkometerStatus:
    """Read-model for the bunkometer widget (label plus style tokens)."""

    status: str
    color: str
    bg_color: str
