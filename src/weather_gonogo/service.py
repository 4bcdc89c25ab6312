"""Request orchestration: geocode, fetch, evaluate, classify.

Each request runs its stages in sequence:

1. Geocode the query (skipped when the query is already ``lat,lon``)
2. Fetch current weather
3. Fetch the aviation report (optional, failures degrade to weather-only)
4. Classify the TAF text and evaluate the snapshot

Geocoding and weather failures end the request. Nothing is cached between
requests, so independent requests can run concurrently on one service.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from weather_gonogo.config import Settings, get_settings
from weather_gonogo.models.aviation import AviationReport
from weather_gonogo.models.location import Coordinates, Place
from weather_gonogo.models.recommendation import Recommendation
from weather_gonogo.models.weather import WeatherSnapshot
from weather_gonogo.providers.base import LocationNotFoundError
from weather_gonogo.providers.nominatim import NominatimGeocoder
from weather_gonogo.providers.openmeteo import OpenMeteoProvider
from weather_gonogo.providers.weather_gov import WeatherGovProvider
from weather_gonogo.rules.engine import evaluate
from weather_gonogo.rules.hazards import classify

logger = logging.getLogger(__name__)


class Briefing(BaseModel):
    """Everything shown to the user for one request."""

    place: Place
    snapshot: WeatherSnapshot
    aviation: AviationReport | None = None
    recommendation: Recommendation
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class GoNoGoService:
    """Runs a go/no-go check for a free-text location.

    Example:
        ```python
        async with GoNoGoService() as service:
            briefing = await service.check("Boise, ID")
            print(briefing.recommendation.overall)
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        geocoder: NominatimGeocoder | None = None,
        weather: OpenMeteoProvider | None = None,
        aviation: WeatherGovProvider | None = None,
    ):
        self.settings = settings or get_settings()
        common: dict[str, Any] = {
            "user_agent": self.settings.http_user_agent,
            "timeout": self.settings.http_timeout,
        }
        self.geocoder = geocoder or NominatimGeocoder(
            base_url=self.settings.nominatim_url, **common
        )
        self.weather = weather or OpenMeteoProvider(
            base_url=self.settings.open_meteo_url, **common
        )
        self.aviation = aviation or WeatherGovProvider(
            base_url=self.settings.weather_gov_url, **common
        )

    async def __aenter__(self) -> GoNoGoService:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        for provider in (self.geocoder, self.weather, self.aviation):
            await provider.aclose()

    async def locate(self, query: str) -> Place:
        """Resolve a query to a place.

        Raises:
            ValueError: If the query is blank
            LocationNotFoundError: If the geocoder has no match
        """
        query = query.strip()
        if not query:
            raise ValueError("Please enter an address, ZIP, city, or place.")

        try:
            return Place.from_coordinates(Coordinates.from_string(query))
        except ValueError:
            pass

        place = await self.geocoder.geocode(query)
        if place is None:
            raise LocationNotFoundError(query, provider=self.geocoder.name)
        return place

    async def check(
        self,
        query: str,
        include_aviation: bool | None = None,
    ) -> Briefing:
        """Run the full check for a location query.

        Args:
            query: Address, ZIP, city, place name or 'lat,lon'
            include_aviation: Override Settings.include_aviation

        Returns:
            Briefing with the recommendation

        Raises:
            ValueError: If the query is blank
            LocationNotFoundError: If the location cannot be geocoded
            ProviderError: If weather data cannot be fetched
            InvalidSnapshotError: If the weather data cannot be evaluated
        """
        if include_aviation is None:
            include_aviation = self.settings.include_aviation

        place = await self.locate(query)
        logger.info(f"Checking conditions for {place.display_name} ({place.coordinates})")

        snapshot = await self.weather.get_current(place.coordinates)

        report: AviationReport | None = None
        if include_aviation:
            report = await self.aviation.get_report(place.coordinates)
            report.assessment = classify(report.taf, mode=self.settings.hazard_match_mode)
            if report.is_empty:
                logger.info("No aviation data, continuing with weather only")

        recommendation = evaluate(
            snapshot,
            thresholds=self.settings.thresholds,
            aviation=report.assessment if report else None,
        ).unwrap()
        logger.info(f"Recommendation for {place.display_name}: {recommendation.overall.label}")

        return Briefing(
            place=place,
            snapshot=snapshot,
            aviation=report,
            recommendation=recommendation,
        )
