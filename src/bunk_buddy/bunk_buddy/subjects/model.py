from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE, DEFAULT_SUBJECT_COLOR


@dataclass(frozen=True)
class Subject:
    """Domain entity: lecture counts for one subject.

    attended_lectures > total_lectures is stored as-is.
    """

    id: str
    user_id: str
    name: str
    created_at: datetime
    total_lectures: int = 0
    attended_lectures: int = 0
    required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE
    color: str = DEFAULT_SUBJECT_COLOR


@dataclass(frozen=True)
class SubjectPatch:
    """Mutable fields of a Subject; None means "leave unchanged"."""

    name: Optional[str] = None
    total_lectures: Optional[int] = None
    attended_lectures: Optional[int] = None
    required_percentage: Optional[float] = None
    color: Optional[str] = None
