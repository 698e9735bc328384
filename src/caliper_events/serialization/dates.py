"""ISO-8601 rendering for timestamps."""

from __future__ import annotations

from datetime import date, datetime, timezone


def format_datetime(value: datetime) -> str:
    """Render ``value`` in UTC with millisecond precision, e.g. ``2016-11-15T10:15:00.000Z``.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def format_date(value: date) -> str:
    return value.isoformat()
