"""HTTP client for the OpenWeatherMap current weather API."""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from weather_proxy.config import (
    OWM_API_BASE_URL, OWM_API_KEY, OWM_UNITS, FETCH_TIMEOUT_SECONDS
)
from weather_proxy.weather.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async client for fetching current conditions from OpenWeatherMap."""

    def __init__(
        self,
        api_key: str = OWM_API_KEY,
        base_url: str = OWM_API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the weather client.

        Args:
            api_key: OpenWeatherMap API key
            base_url: Current weather endpoint URL
            transport: Optional httpx transport, used to stub the provider
        """
        self.api_key = api_key
        self.base_url = base_url
        self.client = httpx.AsyncClient(
            timeout=FETCH_TIMEOUT_SECONDS,
            transport=transport
        )

    def build_params(self, lat: float, lon: float) -> Dict[str, str]:
        """Build query parameters with 6-decimal coordinates and metric units."""
        return {
            "lat": f"{lat:.6f}",
            "lon": f"{lon:.6f}",
            "appid": self.api_key,
            "units": OWM_UNITS
        }

    async def get_current_weather(self, lat: float, lon: float) -> Any:
        """Fetch current conditions for given coordinates.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Decoded JSON document from the provider

        Raises:
            TransportError: If the provider cannot be reached or answers non-2xx
            DecodeError: If the response body is not valid JSON
        """
        logger.info(f"Fetching current weather for lat={lat:.6f}, lon={lon:.6f}")

        try:
            response = await self.client.get(self.base_url, params=self.build_params(lat, lon))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from OpenWeatherMap: {e.response.status_code} - {e.response.text}")
            raise TransportError(f"Upstream returned HTTP {e.response.status_code}", cause=e) from e
        except httpx.RequestError as e:
            # str(e) would include the request URL and with it the API key
            logger.error(f"Request error to OpenWeatherMap: {type(e).__name__}")
            raise TransportError(f"Upstream request failed: {type(e).__name__}", cause=e) from e

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to decode JSON from OpenWeatherMap: {e}")
            raise DecodeError(f"Malformed JSON from upstream: {e}") from e

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
