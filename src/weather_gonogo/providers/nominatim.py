"""Nominatim (OpenStreetMap) geocoder.

## Endpoint
- https://nominatim.openstreetmap.org/search?format=jsonv2&limit=1&q={query}

## Response Format
```json
[
  {
    "place_id": 123,
    "lat": "47.6038321",
    "lon": "-122.330062",
    "display_name": "Seattle, King County, Washington, United States",
    ...
  }
]
```

Latitude and longitude are returned as strings. An empty list means no match.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from weather_gonogo.models.location import Coordinates, Place
from weather_gonogo.providers.base import HttpProvider, ProviderError

logger = logging.getLogger(__name__)


class NominatimGeocoder(HttpProvider):
    """Free-text geocoding through Nominatim.

    Example:
        ```python
        async with NominatimGeocoder(user_agent="my-app/1.0 me@example.com") as geocoder:
            place = await geocoder.geocode("Boise, ID")
        ```
    """

    name = "nominatim"
    base_url = "https://nominatim.openstreetmap.org"

    async def geocode(self, query: str) -> Place | None:
        """Resolve a query to the best-matching place.

        Returns:
            The first match, or None if nothing matched

        Raises:
            ProviderError: If the request fails or the match is malformed
        """
        data = await self._get_json(
            f"{self.base_url}/search",
            params={"format": "jsonv2", "limit": 1, "q": query},
        )

        if not isinstance(data, list) or not data:
            logger.info(f"No geocoding match for '{query}'")
            return None

        return self._translate_response(data[0])

    def _translate_response(self, result: dict[str, Any]) -> Place:
        try:
            coordinates = Coordinates(
                latitude=float(result["lat"]),
                longitude=float(result["lon"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise ProviderError(
                f"Malformed geocoding result: {e}",
                provider=self.name,
            ) from e

        return Place(
            display_name=result.get("display_name") or str(coordinates),
            coordinates=coordinates,
        )
