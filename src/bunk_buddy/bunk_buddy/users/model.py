from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a student using the planner.

    Note: Plain data object; storage lives in the repository.
    """

    id: str
    username: str
    email: str
    name: str
    created_at: datetime
    avatar: Optional[str] = None


@dataclass(frozen=True)
class UserPatch:
    """Profile fields only; username and email are fixed at registration."""

    name: Optional[str] = None
    avatar: Optional[str] = None
