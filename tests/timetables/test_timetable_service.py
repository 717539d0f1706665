from __future__ import annotations

import pytest

from src.bunk_buddy.bunk_buddy.core.exceptions import ValidationError
from src.bunk_buddy.bunk_buddy.timetables.model import TimetablePatch, TimetableSlot
from src.bunk_buddy.bunk_buddy.timetables.service import TimetableService, parse_schedule_csv


def test_csv_groups_rows_by_day_and_skips_incomplete_rows():
    text = "Day,Time,Subject\nMonday,09:00,Maths\nMonday,10:00,Physics\nTuesday,,Chemistry\n\nWednesday,11:00\nTuesday,08:00,Biology\n"

    schedule = parse_schedule_csv(text)

    assert list(schedule) == ["Monday", "Tuesday"]
    assert schedule["Monday"] == [TimetableSlot("09:00", "Maths"), TimetableSlot("10:00", "Physics")]
    assert schedule["Tuesday"] == [TimetableSlot("08:00", "Biology")]


def test_import_csv_creates_active_timetable_named_after_file(store):
    svc = TimetableService(store.timetables)

    tt = svc.import_csv(user_id="u1", filename="sem2.csv", text="Day,Time,Subject\nFriday,14:00,Lab\n")

    assert tt.name == "sem2.csv"
    assert tt.is_active is True
    assert svc.active("u1") == tt


def test_import_csv_without_filename_uses_default_name(store):
    tt = TimetableService(store.timetables).import_csv(user_id="u1", filename=None, text="Day,Time,Subject\n")

    assert tt.name == "Uploaded Timetable"
    assert tt.schedule == {}


def test_active_is_first_active_in_insertion_order(store):
    svc = TimetableService(store.timetables)
    inactive = svc.create(user_id="u1", name="Old", schedule={}, is_active=False)
    first = svc.create(user_id="u1", name="A", schedule={})
    svc.create(user_id="u1", name="B", schedule={})

    assert svc.active("u1") == first

    store.timetables.update(first.id, TimetablePatch(is_active=False))
    assert svc.active("u1").name == "B"
    assert inactive.is_active is False


def test_active_is_none_without_timetables(store):
    assert TimetableService(store.timetables).active("u1") is None


def test_create_parses_json_schedule(store):
    svc = TimetableService(store.timetables)
    tt = svc.create(
        user_id="u1",
        name="Week",
        schedule={"Monday": [{"time": "09:00", "subject": "Maths", "location": "R101"}]},
    )

    assert tt.schedule["Monday"][0].location == "R101"
    assert tt.schedule["Monday"][0].type is None


def test_create_rejects_malformed_schedule(store):
    svc = TimetableService(store.timetables)
    with pytest.raises(ValidationError):
        svc.create(user_id="u1", name="Week", schedule={"Monday": [{"time": "09:00"}]})
    with pytest.raises(ValidationError):
        svc.create(user_id="u1", name="Week", schedule=["Monday"])
