"""Models package - re-exports for convenience."""

from backend.app.models.common import AllowanceRule, DateRange, StatusColor
from backend.app.models.compliance import (
    AllowanceSummary,
    CandidateCheck,
    ComplianceResult,
    DayStatus,
)
from backend.app.models.trip import Trip

__all__ = [
    # Common
    "AllowanceRule",
    "DateRange",
    "StatusColor",
    # Trip
    "Trip",
    # Results
    "AllowanceSummary",
    "CandidateCheck",
    "ComplianceResult",
    "DayStatus",
]
