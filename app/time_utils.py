"""Time zone utilities shared across the club pages."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from dateutil import parser
from zoneinfo import ZoneInfo

UTC = ZoneInfo("UTC")
DEFAULT_TZ = "Africa/Casablanca"


def parse_dt(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp (or date) into an aware datetime, UTC if naive."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    else:
        try:
            dt = parser.isoparse(str(value))
        except (TypeError, ValueError, OverflowError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def to_tz(dt_iso: str | datetime, tz: str) -> datetime:
    """Parse ISO timestamp and convert to timezone ``tz`` (IANA name)."""

    dt = parse_dt(dt_iso)
    if dt is None:
        raise ValueError(f"Not a timestamp: {dt_iso!r}")
    return dt.astimezone(ZoneInfo(tz))


def to_utc(date_obj: date, time_obj: time, tz_name: str) -> datetime:
    """Combine date & time in ``tz_name`` and convert to UTC-aware datetime."""

    local_dt = datetime.combine(date_obj, time_obj).replace(tzinfo=ZoneInfo(tz_name))
    return local_dt.astimezone(UTC)


def utc_iso(dt: datetime | None) -> str | None:
    """Return an ISO 8601 string in UTC for ``dt`` (tolerates naive input)."""

    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat()


def is_upcoming(match: Dict[str, Any], now: datetime) -> bool:
    """A match is upcoming while it has no result and has not kicked off."""

    if match.get("result"):
        return False
    when = parse_dt(match.get("date"))
    return when is not None and when >= now


def split_schedule(
    matches: Iterable[Dict[str, Any]], now: datetime
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Return ``(upcoming ascending, past descending)`` by match date."""

    far_past = datetime.min.replace(tzinfo=UTC)
    upcoming: List[Dict[str, Any]] = []
    past: List[Dict[str, Any]] = []
    for match in matches:
        (upcoming if is_upcoming(match, now) else past).append(match)

    def key(row: Dict[str, Any]) -> datetime:
        return parse_dt(row.get("date")) or far_past

    upcoming.sort(key=key)
    past.sort(key=key, reverse=True)
    return upcoming, past


__all__ = ["UTC", "DEFAULT_TZ", "parse_dt", "to_tz", "to_utc", "utc_iso", "is_upcoming", "split_schedule"]
