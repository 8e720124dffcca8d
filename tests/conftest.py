"""Pytest fixtures for sunlight-calc tests.

This module provides test fixtures that ensure:
1. No SUNLIGHT_CALC_* environment variables leak into tests
2. Settings are re-read for every test
"""

import os
from datetime import date

import pytest

from sunlight_calc.models.location import Coordinates, Location


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Drop SUNLIGHT_CALC_* variables and any local .env file."""
    for key in list(os.environ):
        if key.startswith("SUNLIGHT_CALC_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from sunlight_calc.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Location Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Sample coordinates in northern Germany (54°N, 9°E)."""
    return Coordinates(latitude=54, longitude=9)


@pytest.fixture
def arctic_coordinates() -> Coordinates:
    """Coordinates north of the Arctic Circle (70°N)."""
    return Coordinates(latitude=70, longitude=19)


@pytest.fixture
def sample_location(sample_coordinates: Coordinates) -> Location:
    """Sample location with coordinates and timezone."""
    return Location(
        coordinates=sample_coordinates,
        timezone="Europe/Berlin",
        name="Schleswig-Holstein",
    )


@pytest.fixture
def midsummer() -> date:
    return date(2000, 7, 1)


@pytest.fixture
def equinox() -> date:
    """A date on which every phase occurs at mid-latitudes."""
    return date(2000, 3, 20)
