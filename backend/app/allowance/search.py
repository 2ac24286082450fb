"""Bounded searches over the allowance: longest stay and earliest availability."""

from collections.abc import Sequence
from datetime import date

from backend.app.allowance.dates import add_days
from backend.app.allowance.window import get_days_used, resolve_rule
from backend.app.config import get_settings
from backend.app.models.common import AllowanceRule, DateRange
from backend.app.utils.logging import search_logger


def get_max_stay_from(
    existing_ranges: Sequence[DateRange],
    start_date: date,
    rule: AllowanceRule | None = None,
) -> int:
    """Longest continuous stay starting on start_date that stays within the allowance.

    Grows a candidate [start_date, start_date + i] one day at a time and
    stops at the first length that overstays. Extending the candidate only
    adds presence days, so no longer candidate can recover.

    Args:
        existing_ranges: Ranges already recorded
        start_date: First day of the stay
        rule: Allowance rule; defaults to configured settings

    Returns:
        Number of days (0..max_stay_days); 0 if the first day already overstays
    """
    rule = resolve_rule(rule)
    max_days = 0

    for i in range(rule.max_stay_days):
        check_date = add_days(start_date, i)
        candidate = DateRange(start=start_date, end=check_date)
        used = get_days_used([*existing_ranges, candidate], check_date, rule)

        if used > rule.max_stay_days:
            break
        max_days = i + 1

    return max_days


def get_earliest_available_date(
    existing_ranges: Sequence[DateRange],
    required_days: int,
    search_from: date,
    rule: AllowanceRule | None = None,
    horizon_days: int | None = None,
) -> date | None:
    """First date on or after search_from that allows a stay of required_days.

    Args:
        existing_ranges: Ranges already recorded
        required_days: Length of the continuous stay needed
        search_from: Earliest acceptable start date
        rule: Allowance rule; defaults to configured settings
        horizon_days: Number of start dates to try; defaults to configured settings

    Returns:
        The first qualifying start date, or None if none exists within the horizon
    """
    rule = resolve_rule(rule)
    if horizon_days is None:
        horizon_days = get_settings().search_horizon_days

    for offset in range(horizon_days):
        candidate_start = add_days(search_from, offset)
        if get_max_stay_from(existing_ranges, candidate_start, rule) >= required_days:
            search_logger.log_search(
                "earliest_available_date",
                search_from,
                "found",
                iterations=offset + 1,
                result=candidate_start,
                required_days=required_days,
            )
            return candidate_start

    search_logger.log_search(
        "earliest_available_date",
        search_from,
        "exhausted",
        iterations=horizon_days,
        required_days=required_days,
    )
    return None


def get_run_out_date(
    existing_ranges: Sequence[DateRange],
    enter_date: date,
    rule: AllowanceRule | None = None,
) -> date | None:
    """Last compliant day of a continuous stay entered on enter_date.

    Returns None when even enter_date itself would overstay.
    """
    max_stay = get_max_stay_from(existing_ranges, enter_date, rule)
    if max_stay <= 0:
        return None
    return add_days(enter_date, max_stay - 1)
