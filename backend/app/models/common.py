"""Common types and enums shared across all models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from backend.app.config import Settings, get_settings


class StatusColor(str, Enum):
    """Traffic-light status for remaining allowance."""

    green = "green"
    amber = "amber"
    red = "red"
    flashing_red = "flashing-red"


class DateRange(BaseModel):
    """Calendar date range, inclusive of both start and end."""

    start: date
    end: date

    @field_validator("end")
    @classmethod
    def validate_end_after_start(cls, v: date, info: ValidationInfo) -> date:
        """Ensure end >= start."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be >= start")
        return v


class AllowanceRule(BaseModel):
    """Rolling-window stay rule, e.g. 90 days in any 180."""

    max_stay_days: int = Field(90, gt=0, description="Days of presence allowed per window")
    window_days: int = Field(180, gt=0, description="Length of the trailing window in days")

    @model_validator(mode="after")
    def validate_allowance_fits_window(self) -> "AllowanceRule":
        """Ensure the allowance is not longer than the window itself."""
        if self.max_stay_days > self.window_days:
            raise ValueError(
                f"max_stay_days ({self.max_stay_days}) cannot exceed window_days ({self.window_days})"
            )
        return self

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AllowanceRule":
        """Build the deployment's default rule."""
        settings = settings or get_settings()
        return cls(max_stay_days=settings.max_stay_days, window_days=settings.window_days)
