"""Pytest fixtures for weather go/no-go tests.

This module provides test fixtures that ensure:
1. No external API calls are made (all HTTP goes through httpx.MockTransport)
2. Isolated test environment with controlled configuration
"""

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("HTTP_USER_AGENT", "weather-gonogo-tests/0.1.0")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from weather_gonogo.models.location import Coordinates
from weather_gonogo.models.weather import WeatherSnapshot


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from weather_gonogo.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


Route = tuple[int, Any]


def mock_client(routes: dict[str, Route], calls: list[httpx.Request] | None = None) -> httpx.AsyncClient:
    """Build an AsyncClient answering from a path -> (status, json) table.

    Unknown paths answer 404. Every request is appended to ``calls`` if given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        status, body = routes.get(request.url.path, (404, {"detail": "not found"}))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    return mock_client


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Sample coordinates for Boise, Idaho."""
    return Coordinates(latitude=43.615, longitude=-116.2023)


def snapshot(**overrides: Any) -> WeatherSnapshot:
    """Calm baseline snapshot (every factor GO) with overrides."""
    values: dict[str, Any] = {
        "wind_speed_ms": 5,
        "wind_gust_ms": 10,
        "precipitation_mm_h": 0,
        "snowfall_mm_h": 0,
        "visibility_m": 5000,
        "cloud_base_m": 500,
        "observed_at": "2024-06-15T12:00",
    }
    values.update(overrides)
    return WeatherSnapshot(**values)


@pytest.fixture
def make_snapshot() -> Callable[..., WeatherSnapshot]:
    return snapshot


@pytest.fixture
def calm_snapshot() -> WeatherSnapshot:
    return snapshot()


@pytest.fixture
def open_meteo_response() -> dict[str, Any]:
    """Open-Meteo current conditions response (calm day)."""
    return {
        "latitude": 43.62,
        "longitude": -116.2,
        "current_units": {
            "time": "iso8601",
            "wind_speed_10m": "m/s",
            "wind_gusts_10m": "m/s",
            "precipitation": "mm",
            "snowfall": "cm",
            "visibility": "m",
            "cloud_base": "m",
        },
        "current": {
            "time": "2024-06-15T12:00",
            "interval": 900,
            "wind_speed_10m": 3.2,
            "wind_gusts_10m": 7.5,
            "precipitation": 0.0,
            "snowfall": 0.0,
            "visibility": 24140.4,
            "cloud_base": 1520.6,
        },
    }


@pytest.fixture
def weather_gov_routes() -> dict[str, Route]:
    """api.weather.gov responses for a point near KBOI."""
    base = "https://api.weather.gov"
    return {
        "/points/43.615,-116.2023": (
            200,
            {"properties": {"observationStations": f"{base}/gridpoints/BOI/132,86/stations"}},
        ),
        "/gridpoints/BOI/132,86/stations": (
            200,
            {"observationStations": [f"{base}/stations/KBOI", f"{base}/stations/KMAN"]},
        ),
        "/stations/KBOI/observations/latest": (
            200,
            {"properties": {"rawMessage": "KBOI 151153Z 32008KT 10SM FEW250 24/03 A3002"}},
        ),
        "/products/types/TAF/locations/KBOI": (
            200,
            {"@graph": [{"id": f"{base}/products/abc-123"}]},
        ),
        "/products/abc-123": (
            200,
            {"productText": "TAF KBOI 151120Z 1512/1612 32008KT P6SM FEW250"},
        ),
    }
