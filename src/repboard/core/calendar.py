"""
Calendar normalisation shared by scoring and bucketing.

Every "calendar date" in repboard is the date component of an instant
expressed in UTC.  Naive datetimes are taken to already be UTC.
"""

from datetime import date, datetime, timedelta, timezone


def to_utc(instant: datetime) -> datetime:
    """Return *instant* as an aware UTC datetime."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def calendar_date(instant: datetime) -> date:
    """Date component of *instant* in UTC, ignoring time-of-day."""
    return to_utc(instant).date()


def week_start(day: date) -> date:
    """Monday of the ISO week containing *day*."""
    return day - timedelta(days=day.weekday())


def days_ending(today: date, days: int) -> list[date]:
    """The *days* calendar dates ending with *today*, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def parse_instant(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into an aware UTC datetime.

    Accepts ``YYYY-MM-DD`` (midnight UTC), full datetimes with or without an
    offset, and a trailing ``Z``.

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(text))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
