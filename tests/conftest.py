from __future__ import annotations

import itertools
from datetime import datetime, timedelta

import pytest

from src.bunk_buddy.bunk_buddy.store import build_store


class FakeClock:
    """Manually advanced clock for deterministic timestamps."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def store(clock):
    counter = itertools.count(1)
    return build_store(id_factory=lambda: f"id-{next(counter)}", clock=clock)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.bunk_buddy.bunk_buddy.main import create_app

    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
