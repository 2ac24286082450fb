"""Errors raised by the allowance calculator."""


class AllowanceError(ValueError):
    """Base class for calculator input errors."""


class InvalidDateFormat(AllowanceError):
    """Date string is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date format: {value!r}. Use YYYY-MM-DD (e.g., 2025-06-01)")


class InvalidDateRange(AllowanceError):
    """Range end falls before its start."""

    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Range end {end} is before start {start}")


class DateOutOfRange(AllowanceError):
    """Day arithmetic left the supported calendar (years 1-9999)."""

    def __init__(self, value: object, days: int) -> None:
        self.value = value
        self.days = days
        super().__init__(f"Date {value} shifted by {days} days is outside the supported range")
