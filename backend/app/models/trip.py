"""Trip model - a date range with the metadata the app stores alongside it."""

from pydantic import Field

from backend.app.models.common import DateRange


class Trip(DateRange):
    """A stay inside the zone (entry and exit days both count).

    Only start/end take part in allowance calculations; the rest is
    carried through for the caller.
    """

    id: str = Field(..., min_length=1)
    name: str | None = None
    country: str | None = None
    notes: str | None = Field(default=None, max_length=500)
    is_planned: bool = False
