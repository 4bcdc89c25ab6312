"""Open-Meteo current conditions provider.

## Endpoint
- https://api.open-meteo.com/v1/forecast
- Auth: None required for basic use

## Request Parameters
| Parameter | Value |
|-----------|-------|
| latitude, longitude | decimal degrees |
| current | wind_speed_10m,wind_gusts_10m,precipitation,snowfall,visibility,cloud_base |
| wind_speed_unit | ms |
| timezone | auto |

## Response Format
```json
{
  "current_units": {"wind_speed_10m": "m/s", "snowfall": "cm", ...},
  "current": {
    "time": "2024-06-15T12:00",
    "wind_speed_10m": 3.1,
    "wind_gusts_10m": 6.4,
    "precipitation": 0.0,
    "snowfall": 0.0,
    "visibility": 24140.0,
    "cloud_base": 900.0
  }
}
```

## Variable Translation (Open-Meteo -> Canonical)
| Open-Meteo Field | Canonical Field | Unit | Notes |
|------------------|-----------------|------|-------|
| wind_speed_10m | wind_speed_ms | m/s | Requested in m/s |
| wind_gusts_10m | wind_gust_ms | m/s | Requested in m/s |
| precipitation | precipitation_mm_h | mm/h | Preceding hour sum |
| snowfall | snowfall_mm_h | mm/h | Reported in cm, multiplied by 10 |
| visibility | visibility_m | m | Direct mapping |
| cloud_base | cloud_base_m | m | Direct mapping |
| time | observed_at | ISO 8601 | Local time of the location |

Fields missing from the response are left as None; the evaluator rejects them.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from weather_gonogo.models.location import Coordinates
from weather_gonogo.models.weather import WeatherSnapshot
from weather_gonogo.providers.base import HttpProvider, ProviderError

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "wind_speed_10m",
    "wind_gusts_10m",
    "precipitation",
    "snowfall",
    "visibility",
    "cloud_base",
)

# Open-Meteo field -> (snapshot field, canonical unit)
FIELD_MAP: dict[str, tuple[str, str]] = {
    "wind_speed_10m": ("wind_speed_ms", "m/s"),
    "wind_gusts_10m": ("wind_gust_ms", "m/s"),
    "precipitation": ("precipitation_mm_h", "mm"),
    "snowfall": ("snowfall_mm_h", "mm"),
    "visibility": ("visibility_m", "m"),
    "cloud_base": ("cloud_base_m", "m"),
}

# (from unit, to unit) -> factor
UNIT_FACTORS: dict[tuple[str, str], float] = {
    ("cm", "mm"): 10.0,
    ("inch", "mm"): 25.4,
    ("ft", "m"): 0.3048,
    ("km/h", "m/s"): 1 / 3.6,
    ("mp/h", "m/s"): 0.44704,
    ("kn", "m/s"): 0.514444,
}


def convert_unit(value: Any, unit: str | None, canonical: str) -> Any:
    """Convert a reading to its canonical unit.

    Non-numeric values pass through untouched so the evaluator can report them.
    """
    if value is None or unit is None or unit == canonical:
        return value
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return value
    factor = UNIT_FACTORS.get((unit, canonical))
    if factor is None:
        logger.warning(f"Unknown unit '{unit}' for canonical '{canonical}', leaving as-is")
        return value
    return value * factor


class OpenMeteoProvider(HttpProvider):
    """Current weather conditions from Open-Meteo."""

    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1"

    async def get_current(self, coordinates: Coordinates) -> WeatherSnapshot:
        """Get the current weather snapshot for a location.

        Raises:
            ProviderError: If the request fails or has no current block
        """
        params = {
            "latitude": str(coordinates.latitude),
            "longitude": str(coordinates.longitude),
            "current": ",".join(CURRENT_FIELDS),
            "wind_speed_unit": "ms",
            "timezone": "auto",
        }
        data = await self._get_json(f"{self.base_url}/forecast", params=params)
        return self._translate_response(data)

    def _translate_response(self, response_data: dict[str, Any]) -> WeatherSnapshot:
        """Translate an Open-Meteo response to a snapshot.

        See module docstring for detailed field mapping.
        """
        current = response_data.get("current") if isinstance(response_data, dict) else None
        if not isinstance(current, dict):
            raise ProviderError(
                "Response has no current conditions",
                provider=self.name,
            )
        units = response_data.get("current_units") or {}

        values: dict[str, Any] = {}
        for source, (target, canonical) in FIELD_MAP.items():
            values[target] = convert_unit(current.get(source), units.get(source), canonical)

        try:
            return WeatherSnapshot(
                **values,
                observed_at=current.get("time"),
                raw_data=current,
            )
        except ValidationError as e:
            raise ProviderError(
                f"Malformed current conditions: {e}",
                provider=self.name,
            ) from e
