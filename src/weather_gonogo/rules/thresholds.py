"""Operational thresholds for go/no-go evaluation.

All limits use the canonical snapshot units (m/s, mm/h, m). Comparisons are
strict: a value exactly equal to a limit is not a violation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ThresholdSet(BaseModel):
    """Immutable set of named go/no-go limits."""

    model_config = ConfigDict(frozen=True)

    wind_caution: float = Field(default=10, ge=0, description="Wind speed caution above (m/s)")
    wind_no_go: float = Field(default=14, ge=0, description="Wind speed no-go above (m/s)")
    gust_no_go: float = Field(default=18, ge=0, description="Gust no-go above (m/s)")
    rain_caution: float = Field(default=0.5, ge=0, description="Precipitation caution above (mm/h)")
    rain_no_go: float = Field(default=2, ge=0, description="Precipitation no-go above (mm/h)")
    snow_no_go: float = Field(default=0.5, ge=0, description="Snowfall no-go above (mm/h)")
    min_visibility: float = Field(default=3000, ge=0, description="Visibility no-go below (m)")
    min_cloud_base: float = Field(default=120, ge=0, description="Cloud base no-go below (m)")

    @model_validator(mode="after")
    def check_tiers(self) -> ThresholdSet:
        """Caution limits must not sit above their no-go limits."""
        if self.wind_caution > self.wind_no_go:
            raise ValueError("wind_caution must not exceed wind_no_go")
        if self.rain_caution > self.rain_no_go:
            raise ValueError("rain_caution must not exceed rain_no_go")
        return self


DEFAULT_THRESHOLDS = ThresholdSet()
