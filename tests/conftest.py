"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator

import pytest

from backend.app.config import get_settings
from backend.app.models import AllowanceRule


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings per test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def schengen_rule() -> AllowanceRule:
    """The standard 90 days in any 180 rule."""
    return AllowanceRule(max_stay_days=90, window_days=180)
