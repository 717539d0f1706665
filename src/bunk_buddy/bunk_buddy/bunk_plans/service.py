from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import optional_text, require_choice, require_non_empty
from ..core.enums import BunkPlanStatus
from .model import BunkPlan, BunkPlanPatch
from .repository import BunkPlanRepository


class BunkPlanService:
    def __init__(self, plans: BunkPlanRepository):
        self._plans = plans

    def list_for_user(self, user_id: str) -> Sequence[BunkPlan]:
        return self._plans.list_by_user(user_id)

    def list_for_group(self, group_id: str) -> Sequence[BunkPlan]:
        return self._plans.list_by_group(group_id)

    def create(
        self,
        *,
        user_id: str,
        subject_id: str,
        planned_date: Any,
        group_id: Optional[str] = None,
        reason: Optional[str] = None,
        status: Any = None,
    ) -> BunkPlan:
        return self._plans.create(
            user_id=user_id,
            subject_id=require_non_empty(subject_id, "Subject"),
            planned_date=parse_iso_datetime(planned_date, "Planned date"),
            group_id=optional_text(group_id, "Group"),
            reason=optional_text(reason, "Reason"),
            status=require_choice(status, BunkPlanStatus, "Status") if status is not None else None,
        )

    def update(
        self,
        plan_id: str,
        *,
        planned_date: Any = None,
        reason: Optional[str] = None,
        status: Any = None,
    ) -> Optional[BunkPlan]:
        patch = BunkPlanPatch(
            planned_date=parse_iso_datetime(planned_date, "Planned date") if planned_date is not None else None,
            reason=optional_text(reason, "Reason"),
            status=require_choice(status, BunkPlanStatus, "Status") if status is not None else None,
        )
        return self._plans.update(plan_id, patch)
