from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import BunkPlanStatus
from .model import BunkPlan, BunkPlanPatch


class BunkPlanRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[BunkPlan]:
        raise NotImplementedError

    def list_by_group(self, group_id: str) -> Sequence[BunkPlan]:
        raise NotImplementedError

    def get_by_id(self, plan_id: str) -> Optional[BunkPlan]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: str,
        subject_id: str,
        planned_date: datetime,
        group_id: Optional[str] = None,
        reason: Optional[str] = None,
        status: Optional[BunkPlanStatus] = None,
    ) -> BunkPlan:
        raise NotImplementedError

    def update(self, plan_id: str, patch: BunkPlanPatch) -> Optional[BunkPlan]:
        raise NotImplementedError

    def delete(self, plan_id: str) -> bool:
        raise NotImplementedError
