"""Allowance endpoints - status, check, max-stay, earliest, breakdown, status-color."""

import logging
import time
from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field, model_validator

from backend.app.allowance import (
    AllowanceError,
    add_days,
    check_candidate,
    get_daily_breakdown,
    get_earliest_available_date,
    get_max_stay_from,
    get_status_color,
    summarize_allowance,
    today_utc,
)
from backend.app.config import get_settings
from backend.app.models import (
    AllowanceRule,
    AllowanceSummary,
    CandidateCheck,
    DateRange,
    DayStatus,
    StatusColor,
    Trip,
)
from backend.app.utils.metrics import metrics

router = APIRouter(prefix="/allowance", tags=["allowance"])
logger = logging.getLogger(__name__)


class AllowanceRequest(BaseModel):
    """Fields shared by every compute request."""

    trips: list[Trip] = Field(default_factory=list)
    rule: AllowanceRule | None = None

    def resolved_rule(self) -> AllowanceRule:
        return self.rule if self.rule is not None else AllowanceRule.from_settings()


class StatusRequest(AllowanceRequest):
    """Request body for POST /allowance/status."""

    reference_date: date | None = Field(default=None, description="Defaults to today (UTC)")


class CheckRequest(AllowanceRequest):
    """Request body for POST /allowance/check."""

    candidate: DateRange
    exclude_trip_id: str | None = Field(
        default=None, description="Id of the stored trip being edited, left out of existing trips"
    )


class MaxStayRequest(AllowanceRequest):
    """Request body for POST /allowance/max-stay."""

    start_date: date


class MaxStayResponse(BaseModel):
    """Response for POST /allowance/max-stay."""

    start_date: date
    max_days: int
    run_out_date: date | None


class EarliestRequest(AllowanceRequest):
    """Request body for POST /allowance/earliest."""

    required_days: int = Field(..., gt=0)
    search_from: date

    @model_validator(mode="after")
    def validate_required_days_within_allowance(self) -> "EarliestRequest":
        """Ensure required_days can ever be satisfied under the rule."""
        max_stay = self.resolved_rule().max_stay_days
        if self.required_days > max_stay:
            raise ValueError(f"required_days must be <= {max_stay}")
        return self


class EarliestResponse(BaseModel):
    """Response for POST /allowance/earliest."""

    required_days: int
    earliest_date: date | None  # None when nothing qualifies within the search horizon


class BreakdownRequest(AllowanceRequest):
    """Request body for POST /allowance/breakdown."""

    start_date: date
    end_date: date

    @model_validator(mode="after")
    def validate_span_within_limit(self) -> "BreakdownRequest":
        """Bound the number of days a single breakdown may return."""
        # end before start is left to the calculator, which reports InvalidDateRange
        limit = get_settings().max_breakdown_days
        if (self.end_date - self.start_date).days + 1 > limit:
            raise ValueError(f"breakdown span must be <= {limit} days")
        return self


class BreakdownResponse(BaseModel):
    """Response for POST /allowance/breakdown."""

    days: list[DayStatus]


class StatusColorResponse(BaseModel):
    """Response for GET /allowance/status-color."""

    days_remaining: int
    status: StatusColor


def _record(operation: str, started: float) -> None:
    metrics.record_latency(operation, (time.perf_counter() - started) * 1000)


def _rejected(route: str, error: AllowanceError) -> HTTPException:
    logger.info(f"[POST /allowance/{route}] rejected: {error}")
    return HTTPException(status_code=422, detail=str(error))


@router.post("/status", response_model=AllowanceSummary)
def allowance_status(request: StatusRequest) -> AllowanceSummary:
    """Allowance snapshot for a reference date (today in UTC by default)."""
    started = time.perf_counter()
    reference_date = request.reference_date or today_utc()

    try:
        summary = summarize_allowance(request.trips, reference_date, request.resolved_rule())
    except AllowanceError as e:
        raise _rejected("status", e) from e

    _record("status", started)
    return summary


@router.post("/check", response_model=CandidateCheck)
def allowance_check(request: CheckRequest) -> CandidateCheck:
    """Check a proposed trip against existing trips, day by day."""
    started = time.perf_counter()

    try:
        result = check_candidate(
            request.trips,
            request.candidate,
            exclude_trip_id=request.exclude_trip_id,
            rule=request.resolved_rule(),
        )
    except AllowanceError as e:
        raise _rejected("check", e) from e

    _record("check", started)
    return result


@router.post("/max-stay", response_model=MaxStayResponse)
def allowance_max_stay(request: MaxStayRequest) -> MaxStayResponse:
    """Longest continuous stay from start_date and the day it runs out."""
    started = time.perf_counter()

    try:
        max_days = get_max_stay_from(request.trips, request.start_date, request.resolved_rule())
        run_out_date = add_days(request.start_date, max_days - 1) if max_days > 0 else None
    except AllowanceError as e:
        raise _rejected("max-stay", e) from e

    _record("max_stay", started)
    return MaxStayResponse(
        start_date=request.start_date, max_days=max_days, run_out_date=run_out_date
    )


@router.post("/earliest", response_model=EarliestResponse)
def allowance_earliest(request: EarliestRequest) -> EarliestResponse:
    """First start date on or after search_from that allows required_days."""
    started = time.perf_counter()

    try:
        earliest = get_earliest_available_date(
            request.trips,
            request.required_days,
            request.search_from,
            rule=request.resolved_rule(),
        )
    except AllowanceError as e:
        raise _rejected("earliest", e) from e
    if earliest is None:
        metrics.inc_search_exhausted("earliest_available_date")

    _record("earliest", started)
    return EarliestResponse(required_days=request.required_days, earliest_date=earliest)


@router.post("/breakdown", response_model=BreakdownResponse)
def allowance_breakdown(request: BreakdownRequest) -> BreakdownResponse:
    """Per-day allowance status between start_date and end_date inclusive."""
    started = time.perf_counter()

    try:
        days = get_daily_breakdown(
            request.trips, request.start_date, request.end_date, request.resolved_rule()
        )
    except AllowanceError as e:
        raise _rejected("breakdown", e) from e

    _record("breakdown", started)
    return BreakdownResponse(days=days)


@router.get("/status-color", response_model=StatusColorResponse)
def allowance_status_color(
    days_remaining: Annotated[int, Query(description="Days of allowance remaining")],
) -> StatusColorResponse:
    """Classify a days-remaining value into a status color."""
    return StatusColorResponse(days_remaining=days_remaining, status=get_status_color(days_remaining))
