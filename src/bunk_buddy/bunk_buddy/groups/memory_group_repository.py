from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import IntegrityError
from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import Group, GroupMember, GroupMemberWithUser, GroupPatch
from .repository import GroupMemberRepository, GroupRepository


class InMemoryGroupMemberRepository(GroupMemberRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def join(self, group_id: str, user_id: str) -> GroupMember:
        # Joining twice yields two rows; callers decide whether that matters.
        member = GroupMember(
            id=self._db.next_id(),
            group_id=group_id,
            user_id=user_id,
            joined_at=self._db.now(),
        )
        return self._db.group_members.insert(member)

    def leave(self, group_id: str, user_id: str) -> bool:
        with self._db.group_members.lock:
            member = next(
                (m for m in self._db.group_members if m.group_id == group_id and m.user_id == user_id),
                None,
            )
            if not member:
                return False
            return self._db.group_members.remove(member.id)

    def get_by_id(self, member_id: str) -> Optional[GroupMember]:
        return self._db.group_members.get(member_id)

    def list_by_group(self, group_id: str) -> Sequence[GroupMember]:
        return [m for m in self._db.group_members if m.group_id == group_id]

    def list_by_group_with_users(self, group_id: str) -> Sequence[GroupMemberWithUser]:
        out: list[GroupMemberWithUser] = []
        for member in self.list_by_group(group_id):
            user = self._db.users.get(member.user_id)
            if user is None:
                raise IntegrityError(f"Group member {member.id} references missing user {member.user_id}")
            out.append(GroupMemberWithUser(member=member, user=user))
        return out

    def delete(self, member_id: str) -> bool:
        return self._db.group_members.remove(member_id)


class InMemoryGroupRepository(GroupRepository):
    def __init__(self, db: MemoryDatabase, members: InMemoryGroupMemberRepository):
        self._db = db
        self._members = members

    def list_by_user(self, user_id: str) -> Sequence[Group]:
        memberships = [m for m in self._db.group_members if m.user_id == user_id]
        groups = (self._db.groups.get(m.group_id) for m in memberships)
        return [g for g in groups if g is not None]

    def get_by_id(self, group_id: str) -> Optional[Group]:
        return self._db.groups.get(group_id)

    def find_by_code(self, code: str) -> Optional[Group]:
        return next((g for g in self._db.groups if g.code == code), None)

    def create(self, *, name: str, code: str, created_by: str, description: Optional[str] = None) -> Group:
        group = Group(
            id=self._db.next_id(),
            name=name,
            code=code,
            created_by=created_by,
            description=description,
            created_at=self._db.now(),
        )
        # Lock order: groups, then group_members.
        with self._db.groups.lock, self._db.group_members.lock:
            self._db.groups.insert(group)
            self._members.join(group.id, created_by)
        return group

    def update(self, group_id: str, patch: GroupPatch) -> Optional[Group]:
        with self._db.groups.lock:
            current = self._db.groups.get(group_id)
            if not current:
                return None
            return self._db.groups.replace(apply_patch(current, patch))

    def delete(self, group_id: str) -> bool:
        return self._db.groups.remove(group_id)
