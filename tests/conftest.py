"""Shared fixtures for weather proxy tests."""

import json
from typing import Callable

import httpx
import pytest

from weather_proxy.weather.client import OpenWeatherClient
from weather_proxy.weather.service import WeatherService

TEST_BASE_URL = "https://owm.test/data/2.5/weather"
TEST_API_KEY = "test-key"


@pytest.fixture
def provider_payload() -> dict:
    """Well-formed current weather document as the provider returns it."""
    return {
        "coord": {"lon": 10.99, "lat": 44.34},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "base": "stations",
        "main": {"temp": 15.3, "feels_like": 14.6, "pressure": 1021, "humidity": 60},
        "visibility": 8000,
        "wind": {"speed": 3.1, "deg": 180},
        "clouds": {"all": 40},
        "dt": 1700020000,
        "sys": {"country": "IT", "sunrise": 1700000000, "sunset": 1700040000},
        "timezone": 3600,
        "name": "Zocca",
        "cod": 200,
    }


@pytest.fixture
def make_service() -> Callable[..., WeatherService]:
    """Build a WeatherService whose client talks to a stub transport."""
    def _make(handler) -> WeatherService:
        client = OpenWeatherClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(handler)
        )
        return WeatherService(client=client)
    return _make


@pytest.fixture
def json_handler():
    """Build a stub handler answering every request with a JSON body."""
    def _make(payload, status_code: int = 200):
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=json.dumps(payload).encode())
        return _handler
    return _make
