"""Traffic-light classification of remaining allowance."""

from backend.app.models.common import StatusColor

# Lower bounds (inclusive) of each band, in days remaining
GREEN_FROM_DAYS = 60
AMBER_FROM_DAYS = 30


def get_status_color(days_remaining: int) -> StatusColor:
    """Map days remaining to a status color.

    <= 0 is flashing red, 1-29 red, 30-59 amber, 60+ green.
    """
    if days_remaining <= 0:
        return StatusColor.flashing_red
    if days_remaining < AMBER_FROM_DAYS:
        return StatusColor.red
    if days_remaining < GREEN_FROM_DAYS:
        return StatusColor.amber
    return StatusColor.green
