from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .bunk_plans.memory_bunk_plan_repository import InMemoryBunkPlanRepository
from .database.connection import MemoryDatabase
from .events.memory_event_repository import InMemoryEventRepository
from .groups.memory_group_repository import InMemoryGroupMemberRepository, InMemoryGroupRepository
from .notifications.memory_notification_repository import InMemoryNotificationRepository
from .subjects.memory_subject_repository import InMemorySubjectRepository
from .timetables.memory_timetable_repository import InMemoryTimetableRepository
from .users.memory_user_repository import InMemoryUserRepository


@dataclass(frozen=True)
class EntityStore:
    """The eight entity repositories over one MemoryDatabase."""

    db: MemoryDatabase

    users: InMemoryUserRepository
    subjects: InMemorySubjectRepository
    groups: InMemoryGroupRepository
    group_members: InMemoryGroupMemberRepository
    events: InMemoryEventRepository
    notifications: InMemoryNotificationRepository
    bunk_plans: InMemoryBunkPlanRepository
    timetables: InMemoryTimetableRepository


def build_store(
    *,
    id_factory: Optional[Callable[[], str]] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> EntityStore:
    kwargs = {}
    if id_factory is not None:
        kwargs["id_factory"] = id_factory
    if clock is not None:
        kwargs["clock"] = clock
    db = MemoryDatabase(**kwargs)

    group_members = InMemoryGroupMemberRepository(db)
    return EntityStore(
        db=db,
        users=InMemoryUserRepository(db),
        subjects=InMemorySubjectRepository(db),
        groups=InMemoryGroupRepository(db, group_members),
        group_members=group_members,
        events=InMemoryEventRepository(db),
        notifications=InMemoryNotificationRepository(db),
        bunk_plans=InMemoryBunkPlanRepository(db),
        timetables=InMemoryTimetableRepository(db),
    )
