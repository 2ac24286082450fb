"""Presence checks: is a calendar day covered by a range?"""

from collections.abc import Iterable
from datetime import date

from backend.app.models.common import DateRange


def is_date_in_range(day: date, date_range: DateRange) -> bool:
    """Return True if day falls within the range (both ends inclusive)."""
    return date_range.start <= day <= date_range.end


def is_date_covered(day: date, ranges: Iterable[DateRange]) -> bool:
    """Return True if day falls within any of the ranges."""
    return any(is_date_in_range(day, r) for r in ranges)
