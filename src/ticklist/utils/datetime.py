"""Utilities for date and datetime handling."""

from datetime import date, datetime, time


def now_local() -> datetime:
    """Get the current local wall-clock time (naive)."""
    return datetime.now()


def end_of_day(day: date) -> datetime:
    """Last second of a calendar day in local time (23:59:59)."""
    return datetime.combine(day, time(23, 59, 59))


def to_local_naive(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def parse_due_date(value: str | date | None) -> date | None:
    """Parse a due date from ISO string or pass through.

    Empty strings mean "no due date", matching an untouched date input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    return date.fromisoformat(value)
