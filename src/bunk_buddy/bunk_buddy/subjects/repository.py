from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject, SubjectPatch


class SubjectRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[Subject]:
        raise NotImplementedError

    def get_by_id(self, subject_id: str) -> Optional[Subject]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, subject_id: str, patch: SubjectPatch) -> Optional[Subject]:
        raise NotImplementedError

    def delete(self, subject_id: str) -> bool:
        raise NotImplementedError
