"""
Domain Entities - Timestamps

UTC normalisation helpers shared by every entity that carries an instant.
Stored instants keep millisecond precision, which is the resolution of
BSON dates, so an entity compares equal to itself after a round trip.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple

ONE_DAY = timedelta(days=1)
ONE_MILLISECOND = timedelta(milliseconds=1)


def to_utc(value: datetime) -> datetime:
    """
    Normalise an instant to an aware UTC datetime.

    Naive values are interpreted as UTC, aware values are converted.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision from an instant."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def normalize_instant(value: datetime) -> datetime:
    """UTC instant at storage precision."""
    return truncate_to_millis(to_utc(value))


def utc_now() -> datetime:
    """Current UTC instant at storage precision."""
    return truncate_to_millis(datetime.now(timezone.utc))


def start_of_day(value: date) -> datetime:
    """Midnight UTC of the given calendar day."""
    if isinstance(value, datetime):
        value = to_utc(value).date()
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def day_window(instant: datetime) -> Tuple[datetime, datetime]:
    """Half-open ``[00:00, next 00:00)`` window of the UTC day containing an instant."""
    start = start_of_day(to_utc(instant).date())
    return start, start + ONE_DAY


def date_range_window(start_date: date, end_date: date) -> Tuple[datetime, datetime]:
    """
    Half-open window covering two calendar dates inclusively.

    The end bound is the midnight following ``end_date``; an instant at
    exactly that midnight belongs to the next day and is excluded.
    """
    return start_of_day(start_date), start_of_day(end_date) + ONE_DAY
