from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import BunkPlanStatus


@dataclass(frozen=True)
class BunkPlan:
    """Domain entity: a lecture the student plans to skip, optionally with a group."""

    id: str
    user_id: str
    subject_id: str
    planned_date: datetime
    created_at: datetime
    group_id: Optional[str] = None
    reason: Optional[str] = None
    status: BunkPlanStatus = BunkPlanStatus.PLANNED


@dataclass(frozen=True)
class BunkPlanPatch:
    planned_date: Optional[datetime] = None
    reason: Optional[str] = None
    status: Optional[BunkPlanStatus] = None
