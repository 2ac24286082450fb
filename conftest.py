"""Global pytest configuration."""

import os

# Tests assume the default 90/180 rule; drop any override before settings load
for _name in ("MAX_STAY_DAYS", "WINDOW_DAYS", "SEARCH_HORIZON_DAYS", "MAX_BREAKDOWN_DAYS"):
    os.environ.pop(_name, None)
