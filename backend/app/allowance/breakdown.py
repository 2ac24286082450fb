"""Per-day allowance breakdown over a date span."""

from collections.abc import Sequence
from datetime import date

from backend.app.allowance.dates import add_days, days_between
from backend.app.allowance.errors import InvalidDateRange
from backend.app.allowance.presence import is_date_covered
from backend.app.allowance.window import get_days_used, resolve_rule
from backend.app.models.common import AllowanceRule, DateRange
from backend.app.models.compliance import DayStatus


def get_daily_breakdown(
    ranges: Sequence[DateRange],
    start_date: date,
    end_date: date,
    rule: AllowanceRule | None = None,
) -> list[DayStatus]:
    """One DayStatus per calendar day from start_date to end_date inclusive.

    Args:
        ranges: Ranges of presence; include any candidate being simulated
        start_date: First day to report
        end_date: Last day to report
        rule: Allowance rule; defaults to configured settings

    Returns:
        Statuses in ascending date order, no gaps

    Raises:
        InvalidDateRange: If end_date is before start_date
    """
    if end_date < start_date:
        raise InvalidDateRange(start_date, end_date)

    rule = resolve_rule(rule)
    days: list[DayStatus] = []

    for i in range(days_between(start_date, end_date) + 1):
        check_date = add_days(start_date, i)
        used = get_days_used(ranges, check_date, rule)
        remaining = rule.max_stay_days - used

        days.append(
            DayStatus(
                date=check_date,
                days_used_in_window=used,
                days_remaining=remaining,
                is_compliant=remaining >= 0,
                is_present=is_date_covered(check_date, ranges),
            )
        )

    return days
