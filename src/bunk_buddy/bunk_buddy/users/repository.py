from __future__ import annotations

from typing import Optional, Protocol

from .model import User, UserPatch


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, *, username: str, email: str, name: str, avatar: Optional[str] = None) -> User:
        raise NotImplementedError

    def update(self, user_id: str, patch: UserPatch) -> Optional[User]:
        raise NotImplementedError

    def delete(self, user_id: str) -> bool:
        raise NotImplementedError
