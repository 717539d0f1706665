from __future__ import annotations

from src.bunk_buddy.bunk_buddy.container import build_container
from src.bunk_buddy.bunk_buddy.core.enums import BunkPlanStatus, EventType, NotificationType, Priority
from src.bunk_buddy.bunk_buddy.events.model import EventPatch
from src.bunk_buddy.bunk_buddy.notifications.model import NotificationPatch
from src.bunk_buddy.bunk_buddy.subjects.model import SubjectPatch
from src.bunk_buddy.bunk_buddy.users.model import UserPatch


def test_subject_create_fills_defaults(store, fixed_now):
    subject = store.subjects.create(user_id="u1", name="Biology")

    assert subject.id == "id-1"
    assert subject.created_at == fixed_now
    assert subject.total_lectures == 0
    assert subject.attended_lectures == 0
    assert subject.required_percentage == 75
    assert subject.color == "#7341ff"
    assert store.subjects.get_by_id(subject.id) == subject


def test_subject_update_merges_patch_and_keeps_identity(store, clock):
    subject = store.subjects.create(user_id="u1", name="Biology", total_lectures=10, attended_lectures=8)
    clock.advance(hours=1)

    updated = store.subjects.update(subject.id, SubjectPatch(attended_lectures=9))

    assert updated.attended_lectures == 9
    assert updated.total_lectures == 10
    assert updated.name == "Biology"
    assert updated.id == subject.id
    assert updated.created_at == subject.created_at
    assert store.subjects.get_by_id(subject.id) == updated


def test_update_unknown_id_returns_none(store):
    assert store.subjects.update("missing", SubjectPatch(name="x")) is None
    assert store.events.update("missing", EventPatch(title="x")) is None


def test_attended_above_total_is_stored(store):
    subject = store.subjects.create(user_id="u1", name="Art", total_lectures=5, attended_lectures=9)
    assert store.subjects.get_by_id(subject.id).attended_lectures == 9


def test_delete_unknown_subject_returns_false_and_keeps_size(store):
    store.subjects.create(user_id="u1", name="Biology")
    before = len(store.db.subjects)

    assert store.subjects.delete("nope") is False
    assert len(store.db.subjects) == before


def test_delete_existing_subject(store):
    subject = store.subjects.create(user_id="u1", name="Biology")

    assert store.subjects.delete(subject.id) is True
    assert store.subjects.get_by_id(subject.id) is None
    assert store.subjects.delete(subject.id) is False


def test_list_by_user_filters_in_insertion_order(store):
    a = store.subjects.create(user_id="u1", name="A")
    store.subjects.create(user_id="u2", name="B")
    c = store.subjects.create(user_id="u1", name="C")

    assert [s.id for s in store.subjects.list_by_user("u1")] == [a.id, c.id]


def test_event_defaults(store, fixed_now):
    event = store.events.create(user_id="u1", title="Lab report", date=fixed_now, type=EventType.LAB)

    assert event.priority == Priority.MEDIUM
    assert event.completed is False
    assert event.description is None
    assert event.subject_id is None


def test_bunk_plans_by_user_and_group(store, fixed_now):
    solo = store.bunk_plans.create(user_id="u1", subject_id="s1", planned_date=fixed_now)
    grouped = store.bunk_plans.create(user_id="u2", subject_id="s1", planned_date=fixed_now, group_id="g1")

    assert solo.status == BunkPlanStatus.PLANNED
    assert [p.id for p in store.bunk_plans.list_by_user("u1")] == [solo.id]
    assert [p.id for p in store.bunk_plans.list_by_group("g1")] == [grouped.id]


def test_user_lookup_by_email_and_username(store):
    user = store.users.create(username="ana", email="ana@example.com", name="Ana")

    assert store.users.get_by_email("ana@example.com") == user
    assert store.users.get_by_username("ana") == user
    assert store.users.get_by_email("nobody@example.com") is None


def test_user_update_changes_profile_only(store, clock):
    user = store.users.create(username="ana", email="ana@example.com", name="Ana")
    clock.advance(hours=1)

    updated = store.users.update(user.id, UserPatch(name="Ana Lima", avatar="a.png"))

    assert updated.name == "Ana Lima"
    assert updated.avatar == "a.png"
    assert (updated.id, updated.username, updated.email) == (user.id, "ana", "ana@example.com")
    assert updated.created_at == user.created_at
    assert store.users.get_by_id(user.id) == updated
    assert store.users.update("missing", UserPatch(name="x")) is None


def test_user_delete(store):
    user = store.users.create(username="ana", email="ana@example.com", name="Ana")

    assert store.users.delete(user.id) is True
    assert store.users.get_by_id(user.id) is None
    assert store.users.delete(user.id) is False


def test_notification_update_keeps_read_flag(store):
    n = store.notifications.create(user_id="u1", title="Low", message="m", type=NotificationType.INFO)
    store.notifications.mark_read(n.id)

    updated = store.notifications.update(n.id, NotificationPatch(title="Very low", type=NotificationType.WARNING))

    assert updated.title == "Very low"
    assert updated.type == NotificationType.WARNING
    assert updated.message == "m"
    assert updated.read is True
    assert updated.created_at == n.created_at
    assert store.notifications.update("missing", NotificationPatch(title="x")) is None

def test_seeded_container_has_demo_user_and_subjects():
    container = build_container()
    store = container.store

    user = store.users.get_by_id("demo-user-1")
    assert user is not None
    assert user.username == "johndoe"

    subjects = store.subjects.list_by_user("demo-user-1")
    assert [(s.total_lectures, s.attended_lectures) for s in subjects] == [(30, 26), (25, 19), (28, 19)]
    assert all(s.required_percentage == 75 for s in subjects)


def test_containers_do_not_share_state():
    first = build_container()
    second = build_container()

    first.store.subjects.create(user_id="demo-user-1", name="Extra")

    assert len(first.store.subjects.list_by_user("demo-user-1")) == 4
    assert len(second.store.subjects.list_by_user("demo-user-1")) == 3
