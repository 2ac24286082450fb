"""Calculator result models."""

from datetime import date

from pydantic import BaseModel, Field

from backend.app.models.common import AllowanceRule, StatusColor
from backend.app.models.trip import Trip


class ComplianceResult(BaseModel):
    """Outcome of checking a candidate range against the allowance."""

    compliant: bool
    max_days: int = Field(..., ge=0, description="Compliant days counted from the candidate start")
    overstay_days: int = Field(..., ge=0, description="Worst deficit on any day of the candidate")


class DayStatus(BaseModel):
    """Allowance status on a single calendar day."""

    date: date
    days_used_in_window: int
    days_remaining: int  # Negative means overstay
    is_compliant: bool
    is_present: bool


class AllowanceSummary(BaseModel):
    """Dashboard view of the allowance on a reference date."""

    reference_date: date
    rule: AllowanceRule
    days_used: int
    days_remaining: int
    status: StatusColor
    max_stay_days: int  # Longest continuous stay starting on reference_date
    run_out_date: date | None
    next_trip: Trip | None = None
    days_until_next_trip: int | None = None


class CandidateCheck(BaseModel):
    """Simulation of a proposed trip on top of existing ones."""

    candidate_days: int
    compliance: ComplianceResult
    breakdown: list[DayStatus]
