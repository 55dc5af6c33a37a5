"""Shared fixtures for the optionkit test suite."""

from __future__ import annotations

import pytest
import structlog

from optionkit.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Every test sees settings loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test that reconfigures it."""
    yield
    structlog.reset_defaults()
