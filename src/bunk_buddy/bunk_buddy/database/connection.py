from __future__ import annotations

from datetime import datetime
from typing import Callable

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from .memory_base import InMemoryTable


class MemoryDatabase:
    """Process-lifetime holder of every entity table.

    Note: There is no durability; everything is gone on restart. Build one per
    process in the container and pass it to the repositories.
    """

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = now_local,
    ):
        self.id_factory = id_factory
        self.clock = clock

        self.users = InMemoryTable("users")
        self.subjects = InMemoryTable("subjects")
        self.groups = InMemoryTable("groups")
        self.group_members = InMemoryTable("group_members")
        self.events = InMemoryTable("events")
        self.notifications = InMemoryTable("notifications")
        self.bunk_plans = InMemoryTable("bunk_plans")
        self.timetables = InMemoryTable("timetables")

    def next_id(self) -> str:
        return self.id_factory()

    def now(self) -> datetime:
        return self.clock()
