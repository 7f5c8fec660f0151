"""Weather service for shaping upstream data into summaries."""

import asyncio
import logging
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import ValidationError

from weather_proxy.config import FETCH_TIMEOUT_SECONDS
from weather_proxy.weather.client import OpenWeatherClient
from weather_proxy.weather.exceptions import DeadlineExceeded, ShapeError
from weather_proxy.weather.models import (
    OwmCurrentResponse, WeatherSummary, WeatherType
)

logger = logging.getLogger(__name__)

COLD_MAX_CELSIUS = 10
MODERATE_MAX_CELSIUS = 25


def classify_weather(temperature: float) -> WeatherType:
    """Classify temperature in Celsius; both boundaries are inclusive."""
    if temperature <= COLD_MAX_CELSIUS:
        return "cold"
    elif temperature <= MODERATE_MAX_CELSIUS:
        return "moderate"
    return "hot"


def render_number(value: Union[int, float]) -> str:
    """Render a number as-is, without a trailing '.0' for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_visibility(visibility_m: float) -> str:
    """Render visibility in whole kilometers, truncating toward zero."""
    return f"{int(int(visibility_m) / 1000)} KM"


def to_local_time(timestamp: float) -> datetime:
    """Convert Unix seconds, truncated to whole seconds, to server local time."""
    return datetime.fromtimestamp(int(timestamp)).astimezone()


def parse_provider_response(raw_data: Any) -> OwmCurrentResponse:
    """Validate the raw provider document in one pass.

    Raises:
        ShapeError: Listing every missing or mistyped field
    """
    try:
        return OwmCurrentResponse.model_validate(raw_data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        logger.error(f"Invalid upstream response shape: {problems}")
        raise ShapeError(problems) from e


def build_summary(raw_data: Any) -> WeatherSummary:
    """Build a WeatherSummary from a raw provider document."""
    data = parse_provider_response(raw_data)
    temperature = data.main.temp

    return WeatherSummary(
        weather_condition=data.weather[0].description,
        temperature=f"{render_number(temperature)} Celsius",
        weather_type=classify_weather(temperature),
        visibility=format_visibility(data.visibility),
        wind_speed=f"{render_number(data.wind.speed)} meter/sec",
        wind_direction=f"{int(data.wind.deg)} degrees",
        cloud_coverage=f"{int(data.clouds.all)} percentage",
        sunrise=to_local_time(data.sys.sunrise),
        sunset=to_local_time(data.sys.sunset)
    )


class WeatherService:
    """Service for fetching and summarizing current weather."""

    def __init__(self, client: Optional[OpenWeatherClient] = None):
        """Initialize the weather service.

        Args:
            client: Weather client instance (creates default if None)
        """
        self.client = client or OpenWeatherClient()

    async def get_summary(self, lat: float, lon: float) -> WeatherSummary:
        """Fetch current conditions and build a summary.

        Raises:
            TransportError: If the provider cannot be reached
            DecodeError: If the provider body is not JSON
            ShapeError: If the provider JSON lacks expected fields
        """
        raw_data = await self.client.get_current_weather(lat, lon)
        summary = build_summary(raw_data)
        logger.info(f"Built summary for lat={lat:.6f}, lon={lon:.6f}: {summary.weather_type}")
        return summary

    async def get_summary_within_deadline(
        self,
        lat: float,
        lon: float,
        timeout: float = FETCH_TIMEOUT_SECONDS
    ) -> WeatherSummary:
        """Fetch a summary, giving up once the deadline passes.

        On expiry the pending fetch is cancelled before DeadlineExceeded
        is raised, which aborts the in-flight upstream request.

        Raises:
            DeadlineExceeded: If the fetch did not finish within timeout
            WeatherFetchError: Any failure raised by get_summary
        """
        try:
            return await asyncio.wait_for(self.get_summary(lat, lon), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Weather fetch for lat={lat:.6f}, lon={lon:.6f} exceeded {timeout:g}s")
            raise DeadlineExceeded(timeout) from e

    async def aclose(self):
        """Close the weather client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing weather client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
