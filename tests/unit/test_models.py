"""Tests for model validation and serialization."""

from datetime import date

import pytest
from pydantic import ValidationError

from backend.app.config import get_settings
from backend.app.models import AllowanceRule, ComplianceResult, DateRange, Trip


def test_date_range_rejects_end_before_start() -> None:
    """Test end < start fails validation."""
    with pytest.raises(ValidationError) as exc_info:
        DateRange(start=date(2025, 6, 10), end=date(2025, 6, 1))

    assert "end must be >= start" in str(exc_info.value)


def test_date_range_parses_iso_strings() -> None:
    """Test JSON-style input becomes calendar dates."""
    r = DateRange.model_validate({"start": "2025-06-01", "end": "2025-06-03"})

    assert r.start == date(2025, 6, 1)
    assert r.end == date(2025, 6, 3)


def test_date_range_rejects_malformed_dates() -> None:
    """Test impossible dates fail validation."""
    with pytest.raises(ValidationError):
        DateRange.model_validate({"start": "2025-02-30", "end": "2025-03-01"})


def test_trip_round_trips_through_json() -> None:
    """Test trip metadata survives serialization."""
    trip = Trip(
        id="t1",
        name="Summer",
        country="Italy",
        start=date(2025, 7, 1),
        end=date(2025, 7, 14),
        is_planned=True,
    )

    data = trip.model_dump(mode="json")

    assert data["start"] == "2025-07-01"
    assert data["end"] == "2025-07-14"
    assert Trip.model_validate(data) == trip


def test_trip_is_a_date_range() -> None:
    """Test trips validate their dates like any range."""
    with pytest.raises(ValidationError):
        Trip(id="t1", start=date(2025, 7, 14), end=date(2025, 7, 1))


def test_trip_requires_id() -> None:
    """Test an empty id is rejected."""
    with pytest.raises(ValidationError):
        Trip(id="", start=date(2025, 7, 1), end=date(2025, 7, 1))


def test_allowance_rule_defaults() -> None:
    """Test the default rule is 90 in 180."""
    rule = AllowanceRule()

    assert rule.max_stay_days == 90
    assert rule.window_days == 180


def test_allowance_rule_rejects_allowance_longer_than_window() -> None:
    """Test max_stay_days > window_days fails validation."""
    with pytest.raises(ValidationError) as exc_info:
        AllowanceRule(max_stay_days=200, window_days=180)

    assert "cannot exceed window_days" in str(exc_info.value)


def test_allowance_rule_rejects_non_positive_values() -> None:
    """Test zero-length rules are invalid."""
    with pytest.raises(ValidationError):
        AllowanceRule(max_stay_days=0, window_days=180)
    with pytest.raises(ValidationError):
        AllowanceRule(max_stay_days=90, window_days=0)


def test_allowance_rule_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the default rule follows environment configuration."""
    monkeypatch.setenv("MAX_STAY_DAYS", "60")
    monkeypatch.setenv("WINDOW_DAYS", "120")
    get_settings.cache_clear()

    rule = AllowanceRule.from_settings()

    assert rule.max_stay_days == 60
    assert rule.window_days == 120


def test_compliance_result_rejects_negative_counts() -> None:
    """Test day counts in a result are never negative."""
    with pytest.raises(ValidationError):
        ComplianceResult(compliant=True, max_days=-1, overstay_days=0)
