from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import optional_text, require_email, require_non_empty
from ..core.exceptions import ValidationError
from .model import User, UserPatch
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: look up and register students."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def register(self, *, username: str, email: str, name: str, avatar: Optional[str] = None) -> User:
        username = require_non_empty(username, "Username")
        email = require_email(email)
        name = require_non_empty(name, "Name")
        avatar = optional_text(avatar, "Avatar")

        if self._users.get_by_username(username):
            raise ValidationError("Username is already taken")
        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")

        user = self._users.create(username=username, email=email, name=name, avatar=avatar)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def update_profile(self, user_id: str, *, name: Optional[str] = None, avatar: Optional[str] = None) -> Optional[User]:
        if name is not None:
            name = require_non_empty(name, "Name")
        return self._users.update(user_id, UserPatch(name=name, avatar=optional_text(avatar, "Avatar")))
