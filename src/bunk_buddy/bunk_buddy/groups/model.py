from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..users.model import User


@dataclass(frozen=True)
class Group:
    """Domain entity: a study group joined by a 6-character code."""

    id: str
    name: str
    code: str
    created_by: str
    created_at: datetime
    description: Optional[str] = None


@dataclass(frozen=True)
class GroupPatch:
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class GroupMember:
    id: str
    group_id: str
    user_id: str
    joined_at: datetime


@dataclass(frozen=True)
class GroupMemberWithUser:
    """Read-model: a membership joined with its user."""

    member: GroupMember
    user: User
