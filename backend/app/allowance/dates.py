"""Calendar date helpers.

All calculator dates are plain `datetime.date` values: whole calendar days
with no time-of-day or timezone, so host timezone and DST never shift a day.
Aware datetimes are normalized to their UTC calendar day.
"""

import re
from datetime import date, datetime, timedelta, timezone

from backend.app.allowance.errors import DateOutOfRange, InvalidDateFormat

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def to_canonical_date(value: str | date) -> date:
    """Parse a YYYY-MM-DD string (or normalize a date/datetime) to a calendar date.

    Raises:
        InvalidDateFormat: If the string is not a strict, real YYYY-MM-DD date
    """
    # datetime subclasses date, so check it first
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateFormat(value)

    match = _ISO_DATE.fullmatch(value)
    if not match:
        raise InvalidDateFormat(value)

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateFormat(value) from e


def format_date(value: date) -> str:
    """Format as zero-padded YYYY-MM-DD."""
    return value.isoformat()


def add_days(value: date, days: int) -> date:
    """Shift by a (possibly negative) number of days.

    Raises:
        DateOutOfRange: If the result falls before year 1 or after year 9999
    """
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise DateOutOfRange(value, days) from e


def days_between(start: date, end: date) -> int:
    """Signed whole days from start to end."""
    return (end - start).days


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()
