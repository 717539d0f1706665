from __future__ import annotations

from typing import Optional

from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import User, UserPatch
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._db.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._db.users if u.email == email), None)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._db.users if u.username == username), None)

    def create(
        self,
        *,
        username: str,
        email: str,
        name: str,
        avatar: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> User:
        user = User(
            id=user_id or self._db.next_id(),
            username=username,
            email=email,
            name=name,
            avatar=avatar,
            created_at=self._db.now(),
        )
        return self._db.users.insert(user)

    def update(self, user_id: str, patch: UserPatch) -> Optional[User]:
        with self._db.users.lock:
            current = self._db.users.get(user_id)
            if not current:
                return None
            return self._db.users.replace(apply_patch(current, patch))

    def delete(self, user_id: str) -> bool:
        return self._db.users.remove(user_id)
