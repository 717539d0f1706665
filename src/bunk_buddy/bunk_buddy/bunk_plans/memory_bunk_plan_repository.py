from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import BunkPlanStatus
from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import BunkPlan, BunkPlanPatch
from .repository import BunkPlanRepository


class InMemoryBunkPlanRepository(BunkPlanRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_by_user(self, user_id: str) -> Sequence[BunkPlan]:
        return [p for p in self._db.bunk_plans if p.user_id == user_id]

    def list_by_group(self, group_id: str) -> Sequence[BunkPlan]:
        return [p for p in self._db.bunk_plans if p.group_id == group_id]

    def get_by_id(self, plan_id: str) -> Optional[BunkPlan]:
        return self._db.bunk_plans.get(plan_id)

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
        plan = BunkPlan(
            id=self._db.next_id(),
            user_id=user_id,
            subject_id=subject_id,
            planned_date=planned_date,
            group_id=group_id,
            reason=reason,
            status=status or BunkPlanStatus.PLANNED,
            created_at=self._db.now(),
        )
        return self._db.bunk_plans.insert(plan)

    def update(self, plan_id: str, patch: BunkPlanPatch) -> Optional[BunkPlan]:
        with self._db.bunk_plans.lock:
            current = self._db.bunk_plans.get(plan_id)
            if not current:
                return None
            return self._db.bunk_plans.replace(apply_patch(current, patch))

    def delete(self, plan_id: str) -> bool:
        return self._db.bunk_plans.remove(plan_id)
