"""Base HTTP provider abstraction.

Every upstream service (geocoder, weather, aviation) is wrapped in a provider
that owns an ``httpx.AsyncClient``, retries transient network failures and
translates the service's JSON into the canonical models in
``weather_gonogo.models``.

## Canonical Units (SI-based)
- Wind speed: meters per second (m/s)
- Precipitation and snowfall: millimeters per hour (mm/h)
- Visibility and cloud base: meters (m)

## Supported Providers

### Nominatim (nominatim.openstreetmap.org)
- Endpoint: /search?format=jsonv2&limit=1&q={query}
- Auth: None; an identifying User-Agent is required by the usage policy

### Open-Meteo (open-meteo.com)
- Endpoint: https://api.open-meteo.com/v1/forecast
- Auth: None required for basic use
- Key response path: current

### National Weather Service (api.weather.gov)
- Endpoints: /points/{lat},{lon}, /stations/{id}/observations/latest,
  /products/types/TAF/locations/{id}
- Auth: None; User-Agent required
- Coverage: United States only
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(ProviderError):
    """Raised when provider rate limit is exceeded."""

    def __init__(
        self,
        provider: str,
        retry_after: int | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            f"Rate limit exceeded for {provider}",
            provider=provider,
            status_code=status_code,
        )
        self.retry_after = retry_after


class LocationNotFoundError(ProviderError):
    """Raised when the geocoder has no match for a query."""

    def __init__(self, query: str, provider: str):
        super().__init__(f"No matching location found for '{query}'", provider=provider)
        self.query = query


class HttpProvider:
    """Base class for JSON-over-HTTP providers.

    Attributes:
        name: Provider name used in errors and logs
        base_url: Base URL for the API

    Example:
        ```python
        async with OpenMeteoProvider(user_agent="my-app/1.0") as provider:
            snapshot = await provider.get_current(coordinates)
        ```
    """

    name: str
    base_url: str

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the provider.

        Args:
            base_url: Override the default API base URL
            user_agent: User-Agent string for requests
            timeout: Request timeout in seconds
            client: Pre-built client (shared between providers or faked in tests)
        """
        if base_url:
            self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent or "weather-gonogo/0.1.0"
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpProvider:
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    async def _fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Fetch a URL with retry on timeouts and network errors.

        Raises:
            RateLimitError: If rate limit is exceeded
            ProviderError: If the response status is 400 or above
        """
        client = self._get_client()
        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        logger.debug(f"{self.name}: GET {url} params={params}")
        response = await client.get(url, params=params, headers=request_headers)

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                self.name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                status_code=429,
            )

        if response.status_code >= 400:
            raise ProviderError(
                f"API request failed: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

        return response

    async def _get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Fetch a URL and decode its JSON body.

        Transport failures that survive the retries are raised as ProviderError.
        """
        try:
            response = await self._fetch(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            raise ProviderError(f"Request failed: {e}", provider=self.name) from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to parse response: {e}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e
