"""Rolling-window stay allowance calculator - re-exports for convenience."""

from backend.app.allowance.breakdown import get_daily_breakdown
from backend.app.allowance.compliance import is_range_compliant, range_duration
from backend.app.allowance.dates import (
    add_days,
    days_between,
    format_date,
    to_canonical_date,
    today_utc,
)
from backend.app.allowance.errors import (
    AllowanceError,
    DateOutOfRange,
    InvalidDateFormat,
    InvalidDateRange,
)
from backend.app.allowance.presence import is_date_covered, is_date_in_range
from backend.app.allowance.search import (
    get_earliest_available_date,
    get_max_stay_from,
    get_run_out_date,
)
from backend.app.allowance.status import get_status_color
from backend.app.allowance.summary import check_candidate, summarize_allowance
from backend.app.allowance.window import get_days_remaining, get_days_used, window_bounds

__all__ = [
    # Dates
    "to_canonical_date",
    "format_date",
    "add_days",
    "days_between",
    "today_utc",
    # Errors
    "AllowanceError",
    "InvalidDateFormat",
    "InvalidDateRange",
    "DateOutOfRange",
    # Presence
    "is_date_in_range",
    "is_date_covered",
    # Window
    "window_bounds",
    "get_days_used",
    "get_days_remaining",
    # Compliance
    "range_duration",
    "is_range_compliant",
    # Search
    "get_max_stay_from",
    "get_earliest_available_date",
    "get_run_out_date",
    # Breakdown and status
    "get_daily_breakdown",
    "get_status_color",
    # Views
    "summarize_allowance",
    "check_candidate",
]
