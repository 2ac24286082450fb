"""Rolling-window day counter.

The window for a reference date is the WINDOW_DAYS calendar days ending on
and including that date: [reference - (window_days - 1), reference]. A day
counts once no matter how many ranges cover it.
"""

from collections.abc import Iterable
from datetime import date

from backend.app.allowance.dates import add_days, days_between
from backend.app.models.common import AllowanceRule, DateRange


def resolve_rule(rule: AllowanceRule | None) -> AllowanceRule:
    """Return rule, or the configured default when None."""
    return rule if rule is not None else AllowanceRule.from_settings()


def window_bounds(reference_date: date, rule: AllowanceRule | None = None) -> tuple[date, date]:
    """Return the inclusive (first_day, last_day) of the window ending on reference_date."""
    rule = resolve_rule(rule)
    return add_days(reference_date, -(rule.window_days - 1)), reference_date


def _clamped_spans(
    ranges: Iterable[DateRange], first_day: date, last_day: date
) -> list[tuple[date, date]]:
    """Intersect each range with [first_day, last_day], dropping empty results."""
    spans: list[tuple[date, date]] = []
    for r in ranges:
        start = max(r.start, first_day)
        end = min(r.end, last_day)
        if start <= end:
            spans.append((start, end))
    return spans


def _union_length(spans: list[tuple[date, date]]) -> int:
    """Count distinct days covered by inclusive spans."""
    if not spans:
        return 0

    spans.sort()
    total = 0
    cur_start, cur_end = spans[0]
    for start, end in spans[1:]:
        if start <= add_days(cur_end, 1):
            # Overlapping or contiguous; merge
            cur_end = max(cur_end, end)
        else:
            total += days_between(cur_start, cur_end) + 1
            cur_start, cur_end = start, end
    total += days_between(cur_start, cur_end) + 1
    return total


def get_days_used(
    ranges: Iterable[DateRange],
    reference_date: date,
    rule: AllowanceRule | None = None,
) -> int:
    """Count distinct presence days inside the window ending on reference_date.

    Args:
        ranges: Date ranges of presence (may overlap, any order)
        reference_date: Last day of the window
        rule: Allowance rule; defaults to configured settings

    Returns:
        Number of days in the window covered by at least one range
    """
    first_day, last_day = window_bounds(reference_date, rule)
    return _union_length(_clamped_spans(ranges, first_day, last_day))


def get_days_remaining(
    ranges: Iterable[DateRange],
    reference_date: date,
    rule: AllowanceRule | None = None,
) -> int:
    """Allowance left on reference_date; negative means overstay."""
    rule = resolve_rule(rule)
    return rule.max_stay_days - get_days_used(ranges, reference_date, rule)
