"""Composed views over the calculator: dashboard summary and trip simulation."""

from collections.abc import Sequence
from datetime import date

from backend.app.allowance.breakdown import get_daily_breakdown
from backend.app.allowance.compliance import is_range_compliant, range_duration
from backend.app.allowance.dates import add_days, days_between
from backend.app.allowance.search import get_max_stay_from
from backend.app.allowance.status import get_status_color
from backend.app.allowance.window import get_days_used, resolve_rule
from backend.app.models.common import AllowanceRule, DateRange
from backend.app.models.compliance import AllowanceSummary, CandidateCheck
from backend.app.models.trip import Trip


def _next_planned_trip(ranges: Sequence[DateRange], reference_date: date) -> Trip | None:
    """Earliest planned trip starting after reference_date."""
    upcoming = [
        r for r in ranges if isinstance(r, Trip) and r.is_planned and r.start > reference_date
    ]
    return min(upcoming, key=lambda t: t.start, default=None)


def summarize_allowance(
    ranges: Sequence[DateRange],
    reference_date: date,
    rule: AllowanceRule | None = None,
) -> AllowanceSummary:
    """Allowance snapshot as of reference_date.

    Args:
        ranges: Recorded ranges; Trip instances also feed next-trip lookup
        reference_date: Date to view the allowance from
        rule: Allowance rule; defaults to configured settings

    Returns:
        AllowanceSummary for reference_date
    """
    rule = resolve_rule(rule)
    days_used = get_days_used(ranges, reference_date, rule)
    days_remaining = rule.max_stay_days - days_used
    max_stay = get_max_stay_from(ranges, reference_date, rule)
    next_trip = _next_planned_trip(ranges, reference_date)

    return AllowanceSummary(
        reference_date=reference_date,
        rule=rule,
        days_used=days_used,
        days_remaining=days_remaining,
        status=get_status_color(days_remaining),
        max_stay_days=max_stay,
        run_out_date=add_days(reference_date, max_stay - 1) if max_stay > 0 else None,
        next_trip=next_trip,
        days_until_next_trip=(
            days_between(reference_date, next_trip.start) if next_trip is not None else None
        ),
    )


def check_candidate(
    existing_ranges: Sequence[DateRange],
    candidate: DateRange,
    exclude_trip_id: str | None = None,
    rule: AllowanceRule | None = None,
) -> CandidateCheck:
    """Simulate adding candidate to existing ranges.

    When editing a stored trip, pass its id as exclude_trip_id so the old
    version does not count against the new one.

    Raises:
        InvalidDateRange: If candidate end is before its start
    """
    rule = resolve_rule(rule)
    if exclude_trip_id is not None:
        existing_ranges = [
            r for r in existing_ranges if not (isinstance(r, Trip) and r.id == exclude_trip_id)
        ]

    compliance = is_range_compliant(existing_ranges, candidate, rule)
    breakdown = get_daily_breakdown(
        [*existing_ranges, candidate], candidate.start, candidate.end, rule
    )

    return CandidateCheck(
        candidate_days=range_duration(candidate),
        compliance=compliance,
        breakdown=breakdown,
    )
