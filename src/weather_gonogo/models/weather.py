"""Weather snapshot model.

## Canonical Units
- Wind speed and gusts: meters per second (m/s)
- Precipitation and snowfall: millimeters per hour (mm/h)
- Visibility and cloud base: meters (m)

Providers translate their responses into these units before building a
snapshot. Numeric fields are optional so that a value the upstream API did not
report is carried through as ``None`` and rejected at evaluation time instead
of being replaced with a default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class WeatherSnapshot(BaseModel):
    """A single point-in-time set of weather measurements for one location."""

    wind_speed_ms: float | None = Field(default=None, description="Wind speed at 10 m")
    wind_gust_ms: float | None = Field(default=None, description="Wind gusts at 10 m")
    precipitation_mm_h: float | None = Field(
        default=None, description="Precipitation rate"
    )
    snowfall_mm_h: float | None = Field(default=None, description="Snowfall rate")
    visibility_m: float | None = Field(default=None, description="Visibility distance")
    cloud_base_m: float | None = Field(default=None, description="Cloud base height")
    observed_at: datetime | str | None = Field(
        default=None, description="Observation timestamp as reported upstream"
    )

    raw_data: dict[str, Any] | None = Field(
        default=None, description="Provider record the snapshot was built from"
    )
