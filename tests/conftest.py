"""Root conftest - shared test configuration."""

import os

import pytest

from hallmatch.config import get_settings

# Human-readable logs whenever setup_logging runs without arguments
os.environ.setdefault("HALLMATCH_LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings so env changes in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
