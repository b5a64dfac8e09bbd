"""
Global test configuration fixtures for WorldClock tests.

This module provides reusable pytest fixtures for reference instants, catalog
cities and WorldClockConfig instances used across the test suite.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from src.worldclock.cities import City, CityCatalog
from src.worldclock.config.schema import (
    CityConfig,
    DisplayConfig,
    MeetingsConfig,
    WorkingHoursConfig,
    WorldClockConfig,
)


# == REFERENCE INSTANTS ==


@pytest.fixture
def winter_instant() -> datetime:
    """
    Reference instant in northern winter (no DST in New York or London).

    Returns:
        datetime: 2024-01-15T12:00:00Z
    """
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def summer_instant() -> datetime:
    """
    Reference instant in northern summer (DST in New York and London).

    Returns:
        datetime: 2024-07-15T12:00:00Z
    """
    return datetime(2024, 7, 15, 12, 0, 0, tzinfo=UTC)


# == CITIES ==


@pytest.fixture
def new_york() -> City:
    """New York catalog city."""
    return City("New York", "United States", "America/New_York", -300)


@pytest.fixture
def london() -> City:
    """London catalog city."""
    return City("London", "United Kingdom", "Europe/London", 0)


@pytest.fixture
def mumbai() -> City:
    """Mumbai catalog city (Asia/Kolkata)."""
    return City("Mumbai", "India", "Asia/Kolkata", 330)


@pytest.fixture
def tokyo() -> City:
    """Tokyo catalog city."""
    return City("Tokyo", "Japan", "Asia/Tokyo", 540)


@pytest.fixture
def default_catalog() -> CityCatalog:
    """Catalog of the built-in world cities."""
    return CityCatalog.default()


# == CONFIGURATION ==


@pytest.fixture
def base_config() -> WorldClockConfig:
    """
    Create a configuration with every section at its defaults.

    Returns:
        WorldClockConfig: Default configuration
    """
    return WorldClockConfig()


@pytest.fixture
def custom_config() -> WorldClockConfig:
    """
    Create a configuration with non-default values in every section.

    Returns:
        WorldClockConfig: Customized configuration
    """
    return WorldClockConfig(
        home_timezone="America/New_York",
        display=DisplayConfig(hour12=False, granularity="time", timestamp_format="R"),
        working_hours=WorkingHoursConfig(start="08:30", end="18:00"),
        meetings=MeetingsConfig(duration_minutes=30, step_minutes=15, max_suggestions=5),
        cities=[
            CityConfig(
                name="New York",
                country="United States",
                timezone="America/New_York",
                offset=-300,
            ),
            CityConfig(
                name="London",
                country="United Kingdom",
                timezone="Europe/London",
                offset=0,
            ),
        ],
    )
