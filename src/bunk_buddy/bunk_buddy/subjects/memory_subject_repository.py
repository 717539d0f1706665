from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE, DEFAULT_SUBJECT_COLOR
from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import Subject, SubjectPatch
from .repository import SubjectRepository


class InMemorySubjectRepository(SubjectRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_by_user(self, user_id: str) -> Sequence[Subject]:
        return [s for s in self._db.subjects if s.user_id == user_id]

    def get_by_id(self, subject_id: str) -> Optional[Subject]:
        return self._db.subjects.get(subject_id)

    def create(
        self,
        *,
        user_id: str,
        name: str,
        total_lectures: Optional[int] = None,
        attended_lectures: Optional[int] = None,
        required_percentage: Optional[float] = None,
        color: Optional[str] = None,
        subject_id: Optional[str] = None,
    ) -> Subject:
        subject = Subject(
            id=subject_id or self._db.next_id(),
            user_id=user_id,
            name=name,
            total_lectures=total_lectures if total_lectures is not None else 0,
            attended_lectures=attended_lectures if attended_lectures is not None else 0,
            required_percentage=required_percentage if required_percentage is not None else DEFAULT_REQUIRED_PERCENTAGE,
            color=color or DEFAULT_SUBJECT_COLOR,
            created_at=self._db.now(),
        )
        return self._db.subjects.insert(subject)

    def update(self, subject_id: str, patch: SubjectPatch) -> Optional[Subject]:
        with self._db.subjects.lock:
            current = self._db.subjects.get(subject_id)
            if not current:
                return None
            return self._db.subjects.replace(apply_patch(current, patch))

    def delete(self, subject_id: str) -> bool:
        return self._db.subjects.remove(subject_id)
