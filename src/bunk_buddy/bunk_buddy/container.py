from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calculator.standard_calculator import StandardAttendanceCalculator
from .bunk_plans.service import BunkPlanService
from .dashboard.service import DashboardService
from .database.seed import ensure_demo_data
from .events.service import EventService
from .groups.service import GroupService
from .notifications.service import NotificationService
from .store import EntityStore, build_store
from .subjects.service import SubjectService
from .timetables.service import TimetableService
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    store: EntityStore

    user_service: UserService
    subject_service: SubjectService
    group_service: GroupService
    event_service: EventService
    notification_service: NotificationService
    bunk_plan_service: BunkPlanService
    timetable_service: TimetableService
    dashboard_service: DashboardService


def build_container(*, seed_demo_data: bool = True, store: Optional[EntityStore] = None) -> Container:
    store = store or build_store()
    if seed_demo_data:
        ensure_demo_data(store.users, store.subjects)

    calculator = StandardAttendanceCalculator()

    return Container(
        store=store,
        user_service=UserService(store.users),
        subject_service=SubjectService(store.subjects, calculator=calculator),
        group_service=GroupService(store.groups, store.group_members),
        event_service=EventService(store.events),
        notification_service=NotificationService(store.notifications),
        bunk_plan_service=BunkPlanService(store.bunk_plans),
        timetable_service=TimetableService(store.timetables),
        dashboard_service=DashboardService(
            store.subjects,
            store.events,
            store.groups,
            store.group_members,
            calculator=calculator,
        ),
    )
