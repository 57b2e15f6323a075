"""
Shared pytest fixtures.
"""

import pytest
import structlog

from upcean.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_and_logging():
    """Drop cached settings and CLI logging setup between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
