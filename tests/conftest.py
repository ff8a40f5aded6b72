"""Pytest configuration for all tests."""

import pytest
import structlog

from groupkeeper.core.config import get_settings
from groupkeeper.core.logging import clear_context


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Drop cached settings and structlog configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    clear_context()
