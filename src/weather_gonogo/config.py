"""Application configuration.

Configuration is loaded from environment variables (or a ``.env`` file) using
pydantic-settings. No setting is required; defaults reproduce the canonical
thresholds and public endpoints.

## Optional Environment Variables

- LOG_LEVEL: Root log level for the CLI (default: INFO)
- DEBUG: Enable debug logging (default: false)
- HTTP_USER_AGENT: User-Agent sent to every provider (Nominatim and
  weather.gov both require an identifying one)
- HTTP_TIMEOUT: Request timeout in seconds
- INCLUDE_AVIATION: Fetch METAR/TAF from weather.gov (default: true)
- HAZARD_MATCH_MODE: ``substring`` or ``word``
- THRESHOLDS__<NAME>: Override a single threshold, e.g. THRESHOLDS__WIND_NO_GO=12

## Example .env file

```
LOG_LEVEL=DEBUG
HTTP_USER_AGENT=weather-gonogo/0.1.0 ops@example.com
THRESHOLDS__MIN_VISIBILITY=5000
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_gonogo.rules.hazards import MatchMode
from weather_gonogo.rules.thresholds import ThresholdSet


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Weather Go/No-Go"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # HTTP
    http_user_agent: str = Field(
        default="weather-gonogo/0.1.0",
        description="User-Agent for all provider requests",
    )
    http_timeout: float = Field(default=15.0, gt=0, le=120)

    # Providers
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    open_meteo_url: str = "https://api.open-meteo.com/v1"
    weather_gov_url: str = "https://api.weather.gov"
    include_aviation: bool = True

    # Evaluation
    hazard_match_mode: MatchMode = MatchMode.SUBSTRING
    thresholds: ThresholdSet = Field(default_factory=ThresholdSet)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("nominatim_url", "open_meteo_url", "weather_gov_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
