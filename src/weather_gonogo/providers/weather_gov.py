"""National Weather Service (api.weather.gov) aviation provider.

Looks up the nearest observation station for a point and fetches its latest
raw METAR and most recent TAF product text.

## Lookup Chain
1. GET /points/{lat},{lon} -> properties.observationStations (URL)
2. GET {observationStations} -> observationStations[0] (station URL)
3. Station id = last path segment of the station URL
4. GET /stations/{id}/observations/latest -> properties.rawMessage (METAR)
5. GET /products/types/TAF/locations/{id} -> @graph[0].id (product URL)
6. GET {product URL} -> productText (TAF)

A failed METAR or TAF lookup only blanks that text. A failed point or station
lookup ends the chain; whatever was found so far is returned. Responses of an
unexpected shape count as failures.

Coverage is limited to the United States. Aviation data is optional: callers
get an AviationReport in every case, never an exception.
"""

from __future__ import annotations

import logging
from typing import Any

from weather_gonogo.models.aviation import AviationReport
from weather_gonogo.models.location import Coordinates
from weather_gonogo.providers.base import HttpProvider, ProviderError

logger = logging.getLogger(__name__)

# Raised while walking a payload of unexpected shape
MALFORMED_ERRORS = (KeyError, IndexError, TypeError, ValueError)


class WeatherGovProvider(HttpProvider):
    """Nearest-station METAR/TAF from api.weather.gov."""

    name = "weather.gov"
    base_url = "https://api.weather.gov"

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Accept"] = "application/geo+json"
        return headers

    async def get_report(self, coordinates: Coordinates) -> AviationReport:
        """Fetch the aviation report for the station nearest a point.

        Never raises for upstream failures; they are logged and the report
        is returned with the missing parts left as None.
        """
        report = AviationReport()
        try:
            report.station_id = await self._find_station(coordinates)
            if report.station_id is None:
                return report

            report.metar = await self._fetch_metar(report.station_id)
            report.taf = await self._fetch_taf(report.station_id)
        except ProviderError as e:
            logger.warning(f"Aviation data unavailable: {e}")
        except MALFORMED_ERRORS as e:
            logger.warning(f"Aviation data unavailable: malformed response ({e!r})")

        return report

    async def _find_station(self, coordinates: Coordinates) -> str | None:
        point = await self._get_json(
            f"{self.base_url}/points/{coordinates.latitude},{coordinates.longitude}"
        )
        stations_url = _dig(point, "properties", "observationStations")
        if not isinstance(stations_url, str) or not stations_url:
            raise ProviderError("Point has no observation stations", provider=self.name)

        stations = await self._get_json(stations_url)
        station_urls = _dig(stations, "observationStations")
        if not isinstance(station_urls, list) or not station_urls:
            logger.info(f"No observation station near {coordinates}")
            return None

        station_url = station_urls[0]
        if not isinstance(station_url, str):
            raise ProviderError("Malformed observation station entry", provider=self.name)
        return station_url.rstrip("/").split("/")[-1] or None

    async def _fetch_metar(self, station_id: str) -> str | None:
        try:
            data = await self._get_json(
                f"{self.base_url}/stations/{station_id}/observations/latest"
            )
        except ProviderError as e:
            logger.info(f"No METAR for {station_id}: {e}")
            return None
        return _text(_dig(data, "properties", "rawMessage"))

    async def _fetch_taf(self, station_id: str) -> str | None:
        try:
            listing = await self._get_json(
                f"{self.base_url}/products/types/TAF/locations/{station_id}"
            )
            graph = _dig(listing, "@graph")
            if not isinstance(graph, list) or not graph:
                return None
            product_url = _dig(graph[0], "id")
            if not isinstance(product_url, str) or not product_url:
                logger.info(f"Malformed TAF listing for {station_id}")
                return None

            product = await self._get_json(product_url)
        except ProviderError as e:
            logger.info(f"No TAF for {station_id}: {e}")
            return None
        return _text(_dig(product, "productText"))


def _dig(data: Any, *keys: str) -> Any:
    """Walk nested dicts, returning None at the first missing level."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
