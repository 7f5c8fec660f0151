"""API endpoints for weather proxy service."""

import logging
import math
import re
from typing import AsyncGenerator, Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from weather_proxy.config import FETCH_TIMEOUT_SECONDS
from weather_proxy.weather.exceptions import (
    DeadlineExceeded, InvalidParameterError, WeatherFetchError
)
from weather_proxy.weather.models import WeatherSummary
from weather_proxy.weather.service import WeatherService

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch weather data"

# Plain decimal or exponent notation, inf/infinity or nan; no padding or underscores
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?inf(?:inity)?|nan",
    re.IGNORECASE
)

router = APIRouter(tags=["weather"])


async def get_weather_service() -> AsyncGenerator[WeatherService, None]:
    """Dependency to get a weather service, closed once the response is sent."""
    async with WeatherService() as weather_service:
        yield weather_service


def parse_coordinate(raw: Optional[str], name: str) -> float:
    """Parse a query parameter as a float.

    Raises:
        InvalidParameterError: If the value is missing or not numeric
    """
    if raw is None or not NUMBER_PATTERN.fullmatch(raw):
        raise InvalidParameterError(f"Invalid {name}")

    value = float(raw)
    # Finite literals that overflow are out of range, not infinity
    if math.isinf(value) and "inf" not in raw.lower():
        raise InvalidParameterError(f"Invalid {name}")
    return value


@router.get("/weather", response_model=WeatherSummary)
async def get_weather(
    lat: Optional[str] = Query(None, description="Latitude in decimal degrees"),
    lon: Optional[str] = Query(None, description="Longitude in decimal degrees"),
    weather_service: WeatherService = Depends(get_weather_service)
) -> Union[WeatherSummary, PlainTextResponse]:
    """Get simplified current weather for a coordinate pair.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Returns:
        WeatherSummary, or a plain text error response
    """
    # lon is only looked at once lat parsed
    try:
        latitude = parse_coordinate(lat, "latitude")
        longitude = parse_coordinate(lon, "longitude")
    except InvalidParameterError as e:
        logger.info(f"Rejected request: {e.message} (lat={lat!r}, lon={lon!r})")
        return PlainTextResponse(e.message, status_code=400)

    try:
        summary = await weather_service.get_summary_within_deadline(
            latitude, longitude, timeout=FETCH_TIMEOUT_SECONDS
        )
    except DeadlineExceeded as e:
        logger.error(f"Deadline exceeded fetching weather: {e}")
        return PlainTextResponse(FETCH_FAILED_MESSAGE, status_code=500)
    except WeatherFetchError as e:
        logger.error(f"Error fetching weather ({type(e).__name__}): {e}")
        return PlainTextResponse(FETCH_FAILED_MESSAGE, status_code=500)

    return summary
