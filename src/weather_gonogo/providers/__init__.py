"""Upstream data providers: geocoding, current weather, aviation reports."""

from weather_gonogo.providers.base import (
    HttpProvider,
    LocationNotFoundError,
    ProviderError,
    RateLimitError,
)
from weather_gonogo.providers.nominatim import NominatimGeocoder
from weather_gonogo.providers.openmeteo import OpenMeteoProvider
from weather_gonogo.providers.weather_gov import WeatherGovProvider

__all__ = [
    "HttpProvider",
    "LocationNotFoundError",
    "ProviderError",
    "RateLimitError",
    "NominatimGeocoder",
    "OpenMeteoProvider",
    "WeatherGovProvider",
]
