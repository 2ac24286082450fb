"""Compliance check for a candidate range on top of existing ranges."""

from collections.abc import Sequence

from backend.app.allowance.dates import add_days, days_between
from backend.app.allowance.errors import InvalidDateRange
from backend.app.allowance.window import get_days_used, resolve_rule
from backend.app.models.common import AllowanceRule, DateRange
from backend.app.models.compliance import ComplianceResult


def range_duration(date_range: DateRange) -> int:
    """Number of days in the range, counting both start and end.

    Raises:
        InvalidDateRange: If end is before start
    """
    if date_range.end < date_range.start:
        raise InvalidDateRange(date_range.start, date_range.end)
    return days_between(date_range.start, date_range.end) + 1


def is_range_compliant(
    existing_ranges: Sequence[DateRange],
    candidate: DateRange,
    rule: AllowanceRule | None = None,
) -> ComplianceResult:
    """Check every day of candidate against the allowance.

    The candidate is merged into the presence days, so it can push itself
    over the limit. max_days is set on every compliant day, not only on a
    prefix ending at the first violation. While the candidate is continuous
    the count on consecutive candidate days never decreases, so the two
    readings agree.

    Args:
        existing_ranges: Ranges already recorded
        candidate: Proposed range
        rule: Allowance rule; defaults to configured settings

    Returns:
        ComplianceResult with worst-case overstay across the candidate span

    Raises:
        InvalidDateRange: If candidate end is before its start
    """
    rule = resolve_rule(rule)
    all_ranges = [*existing_ranges, candidate]
    candidate_days = range_duration(candidate)

    compliant = True
    max_days = 0
    overstay_days = 0

    for i in range(candidate_days):
        check_date = add_days(candidate.start, i)
        remaining = rule.max_stay_days - get_days_used(all_ranges, check_date, rule)

        if remaining >= 0:
            max_days = i + 1
        else:
            compliant = False
            overstay_days = max(overstay_days, -remaining)

    return ComplianceResult(compliant=compliant, max_days=max_days, overstay_days=overstay_days)
