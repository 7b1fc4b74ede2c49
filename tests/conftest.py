"""Pytest configuration and fixtures for testing."""

import pytest

from itinerary_conflicts import config
from itinerary_conflicts.metrics import MetricsClient


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the cached settings so each test sees its own environment."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def metrics() -> MetricsClient:
    """Create a fresh metrics client."""
    return MetricsClient()
