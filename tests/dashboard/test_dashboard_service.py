from __future__ import annotations

from datetime import timedelta

import pytest

from src.bunk_buddy.bunk_buddy.core.enums import EventType
from src.bunk_buddy.bunk_buddy.dashboard.service import DashboardService
from src.bunk_buddy.bunk_buddy.database.seed import DEMO_USER_ID, ensure_demo_data
from src.bunk_buddy.bunk_buddy.groups.service import GroupService


def _service(store):
    return DashboardService(store.subjects, store.events, store.groups, store.group_members)


def test_overall_attendance_pools_lectures(store):
    ensure_demo_data(store.users, store.subjects)

    stats = _service(store).build_stats(DEMO_USER_ID)

    # (26 + 19 + 19) / (30 + 25 + 28), not the mean of the three percentages.
    assert stats.overall_attendance == pytest.approx(77.1)
    assert stats.safe_to_bunk == 3


def test_empty_user_has_zero_stats(store):
    stats = _service(store).build_stats("nobody")

    assert stats.overall_attendance == 0
    assert stats.safe_to_bunk == 0
    assert stats.upcoming_events == 0
    assert stats.group_count == 0
    assert stats.group_members == 0


def test_upcoming_events_capped_at_five(store, fixed_now):
    for day in range(1, 8):
        store.events.create(user_id="u1", title=f"e{day}", date=fixed_now + timedelta(days=day), type=EventType.EXAM)

    assert _service(store).build_stats("u1").upcoming_events == 5


def test_group_counts(store):
    ensure_demo_data(store.users, store.subjects)
    friend = store.users.create(username="ben", email="ben@example.com", name="Ben")
    groups = GroupService(store.groups, store.group_members, code_factory=lambda: "ABC123")
    groups.create(created_by=DEMO_USER_ID, name="Study")
    groups.join_by_code(user_id=friend.id, code="ABC123")

    stats = _service(store).build_stats(DEMO_USER_ID)

    assert stats.group_count == 1
    assert stats.group_members == 2


def test_seeding_twice_does_not_duplicate(store):
    ensure_demo_data(store.users, store.subjects)
    ensure_demo_data(store.users, store.subjects)

    assert len(store.subjects.list_by_user(DEMO_USER_ID)) == 3
