from __future__ import annotations

import logging
import secrets
import string
from typing import Callable, Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import GROUP_CODE_LENGTH, GROUP_CODE_MAX_ATTEMPTS
from ..core.exceptions import DomainError
from .model import Group, GroupMember, GroupMemberWithUser, GroupPatch
from .repository import GroupMemberRepository, GroupRepository

logger = logging.getLogger(__name__)

_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_group_code(length: int = GROUP_CODE_LENGTH) -> str:
    return "".join(secrets.choice(_CODE_ALPHABET) for _ in range(length))


class GroupService:
    """Use case: create, join and leave study groups."""

    def __init__(
        self,
        groups: GroupRepository,
        members: GroupMemberRepository,
        *,
        code_factory: Callable[[], str] = generate_group_code,
    ):
        self._groups = groups
        self._members = members
        self._code_factory = code_factory

    def list_for_user(self, user_id: str) -> Sequence[Group]:
        return self._groups.list_by_user(user_id)

    def get(self, group_id: str) -> Optional[Group]:
        return self._groups.get_by_id(group_id)

    def _unique_code(self) -> str:
        for _ in range(GROUP_CODE_MAX_ATTEMPTS):
            code = self._code_factory()
            if not self._groups.find_by_code(code):
                return code
        raise DomainError("Could not allocate a unique group code")

    def create(self, *, created_by: str, name: str, description: Optional[str] = None) -> Group:
        name = require_non_empty(name, "Group name")
        group = self._groups.create(
            name=name,
            code=self._unique_code(),
            created_by=created_by,
            description=optional_text(description, "Description"),
        )
        logger.info("User %s created group %s (code=%s)", created_by, group.id, group.code)
        return group

    def update(self, group_id: str, *, name: Optional[str] = None, description: Optional[str] = None) -> Optional[Group]:
        if name is not None:
            name = require_non_empty(name, "Group name")
        return self._groups.update(group_id, GroupPatch(name=name, description=optional_text(description, "Description")))

    def join_by_code(self, *, user_id: str, code: str) -> Optional[GroupMember]:
        code = require_non_empty(code, "Group code")
        group = self._groups.find_by_code(code)
        if not group:
            return None
        member = self._members.join(group.id, user_id)
        logger.info("User %s joined group %s", user_id, group.id)
        return member

    def leave(self, *, group_id: str, user_id: str) -> bool:
        return self._members.leave(group_id, user_id)

    def members(self, group_id: str) -> Sequence[GroupMemberWithUser]:
        return self._members.list_by_group_with_users(group_id)

    def member_count(self, group_id: str) -> int:
        return len(self._members.list_by_group(group_id))
