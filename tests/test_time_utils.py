from datetime import date, datetime, time, timedelta, timezone

import pytest

from app.time_utils import UTC, is_upcoming, parse_dt, split_schedule, to_tz, to_utc, utc_iso

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_parse_dt_naive_is_utc():
    assert parse_dt("2024-06-01T10:00:00") == datetime(2024, 6, 1, 10, tzinfo=UTC)
    assert parse_dt(date(2024, 6, 1)) == datetime(2024, 6, 1, tzinfo=UTC)
    assert parse_dt("") is None
    assert parse_dt("tomorrow-ish") is None


def test_to_tz_converts():
    local = to_tz("2024-01-15T18:00:00+00:00", "Africa/Casablanca")
    assert local.utcoffset() in (timedelta(0), timedelta(hours=1))
    with pytest.raises(ValueError):
        to_tz("nope", "UTC")


def test_to_utc_and_iso():
    dt = to_utc(date(2024, 1, 15), time(19, 0), "Europe/Paris")
    assert dt == datetime(2024, 1, 15, 18, 0, tzinfo=UTC)
    assert utc_iso(datetime(2024, 1, 15, 18, 0)) == "2024-01-15T18:00:00+00:00"
    assert utc_iso(None) is None


def test_is_upcoming():
    future = {"date": (NOW + timedelta(days=1)).isoformat()}
    assert is_upcoming(future, NOW)
    assert not is_upcoming({**future, "result": {"our_score": 3, "opponent_score": 0}}, NOW)
    assert not is_upcoming({"date": (NOW - timedelta(days=1)).isoformat()}, NOW)
    assert not is_upcoming({"date": None}, NOW)


def test_split_schedule_orders_both_sides():
    matches = [
        {"id": 1, "date": (NOW + timedelta(days=9)).isoformat()},
        {"id": 2, "date": (NOW + timedelta(days=2)).isoformat()},
        {"id": 3, "date": (NOW - timedelta(days=9)).isoformat()},
        {"id": 4, "date": (NOW - timedelta(days=2)).isoformat()},
        {"id": 5, "date": "broken"},
    ]
    upcoming, past = split_schedule(matches, NOW)
    assert [m["id"] for m in upcoming] == [2, 1]
    assert [m["id"] for m in past] == [4, 3, 5]
