from __future__ import annotations

import pytest

from src.bunk_buddy.bunk_buddy.core.exceptions import ValidationError
from src.bunk_buddy.bunk_buddy.database.seed import DEMO_USER_ID, ensure_demo_data
from src.bunk_buddy.bunk_buddy.users.service import UserService


def test_register_trims_and_stores(store, fixed_now):
    svc = UserService(store.users)

    user = svc.register(username="  alice ", email="alice@example.com", name="Alice")

    assert user.username == "alice"
    assert user.created_at == fixed_now
    assert svc.get(user.id) == user


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"username": "alice", "email": "other@example.com", "name": "A"}, "Username"),
        ({"username": "bob", "email": "alice@example.com", "name": "B"}, "Email"),
    ],
)
def test_register_rejects_duplicates(store, kwargs, message):
    svc = UserService(store.users)
    svc.register(username="alice", email="alice@example.com", name="Alice")

    with pytest.raises(ValidationError, match=message):
        svc.register(**kwargs)


def test_register_rejects_bad_email(store):
    with pytest.raises(ValidationError):
        UserService(store.users).register(username="carol", email="not-an-email", name="Carol")


def test_demo_seed_is_idempotent(store):
    ensure_demo_data(store.users, store.subjects)
    ensure_demo_data(store.users, store.subjects)

    assert store.users.get_by_id(DEMO_USER_ID).username == "johndoe"
    assert [s.name for s in store.subjects.list_by_user(DEMO_USER_ID)] == ["Mathematics", "Physics", "Chemistry"]
