from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Group, GroupMember, GroupMemberWithUser, GroupPatch


class GroupRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[Group]:
        """Groups the user belongs to; memberships of deleted groups are skipped."""

        raise NotImplementedError

    def get_by_id(self, group_id: str) -> Optional[Group]:
        raise NotImplementedError

    def find_by_code(self, code: str) -> Optional[Group]:
        raise NotImplementedError

    def create(self, *, name: str, code: str, created_by: str, description: Optional[str] = None) -> Group:
        """Store the group and join its creator in the same call."""

        raise NotImplementedError

    def update(self, group_id: str, patch: GroupPatch) -> Optional[Group]:
        raise NotImplementedError

    def delete(self, group_id: str) -> bool:
        raise NotImplementedError


class GroupMemberRepository(Protocol):
    def join(self, group_id: str, user_id: str) -> GroupMember:
        raise NotImplementedError

    def leave(self, group_id: str, user_id: str) -> bool:
        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[GroupMember]:
        raise NotImplementedError

    def list_by_group(self, group_id: str) -> Sequence[GroupMember]:
        raise NotImplementedError

    def list_by_group_with_users(self, group_id: str) -> Sequence[GroupMemberWithUser]:
        """Raises IntegrityError when a membership references a missing user."""

        raise NotImplementedError

    def delete(self, member_id: str) -> bool:
        raise NotImplementedError
