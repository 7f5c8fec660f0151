"""Tests for the OpenWeatherMap client."""

import httpx
import pytest

from weather_proxy.weather.client import OpenWeatherClient
from weather_proxy.weather.exceptions import DecodeError, TransportError


def test_build_params_formats_coordinates():
    client = OpenWeatherClient(api_key="abc123", base_url="https://owm.test/weather")

    params = client.build_params(44.34, -10.5)

    assert params == {
        "lat": "44.340000",
        "lon": "-10.500000",
        "appid": "abc123",
        "units": "metric",
    }


@pytest.mark.asyncio
async def test_get_current_weather_encodes_api_key(provider_payload):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json=provider_payload)

    async with OpenWeatherClient(
        api_key="key&units=imperial",
        base_url="https://owm.test/weather",
        transport=httpx.MockTransport(handler)
    ) as client:
        await client.get_current_weather(1.0, 2.0)

    url = seen[0]
    assert url.params["appid"] == "key&units=imperial"
    assert url.params.get_list("units") == ["metric"]


@pytest.mark.asyncio
async def test_get_current_weather_sends_query(provider_payload):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json=provider_payload)

    async with OpenWeatherClient(
        api_key="abc123",
        base_url="https://owm.test/weather",
        transport=httpx.MockTransport(handler)
    ) as client:
        data = await client.get_current_weather(1.23456789, 2.5)

    assert data["name"] == "Zocca"
    assert seen == {"lat": "1.234568", "lon": "2.500000", "appid": "abc123", "units": "metric"}


@pytest.mark.asyncio
async def test_get_current_weather_upstream_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})

    async with OpenWeatherClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError, match="HTTP 401"):
            await client.get_current_weather(0.0, 0.0)


@pytest.mark.asyncio
async def test_get_current_weather_not_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>gateway</html>")

    async with OpenWeatherClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(DecodeError):
            await client.get_current_weather(0.0, 0.0)
