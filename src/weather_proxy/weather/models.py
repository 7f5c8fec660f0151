"""Data models for the weather proxy service."""

from datetime import datetime
from typing import Any, List, Literal

from pydantic import (
    BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator
)

WeatherType = Literal["cold", "moderate", "hot"]


class WeatherSummary(BaseModel):
    """Simplified current conditions served to clients."""
    weather_condition: str = Field(..., description="Provider description of current conditions")
    temperature: str = Field(..., description="Temperature, e.g. '15.3 Celsius'")
    weather_type: WeatherType = Field(..., description="Classification derived from temperature")
    visibility: str = Field(..., description="Visibility in whole kilometers, e.g. '8 KM'")
    wind_speed: str = Field(..., description="Wind speed, e.g. '3.1 meter/sec'")
    wind_direction: str = Field(..., description="Wind direction, e.g. '180 degrees'")
    cloud_coverage: str = Field(..., description="Cloud coverage, e.g. '40 percentage'")
    sunrise: datetime = Field(..., description="Sunrise in server local time")
    sunset: datetime = Field(..., description="Sunset in server local time")


# Upstream (OpenWeatherMap current weather) schema. Only the consumed
# fields are declared; strict scalars reject strings posing as numbers.

class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OwmCondition(_UpstreamModel):
    description: StrictStr


class OwmMain(_UpstreamModel):
    temp: StrictFloat


class OwmWind(_UpstreamModel):
    speed: StrictFloat
    deg: StrictFloat


class OwmClouds(_UpstreamModel):
    all: StrictFloat


class OwmSys(_UpstreamModel):
    sunrise: StrictFloat
    sunset: StrictFloat


class OwmCurrentResponse(_UpstreamModel):
    """Raw response from the OpenWeatherMap current weather API."""
    weather: List[OwmCondition] = Field(..., min_length=1)
    main: OwmMain
    visibility: StrictFloat
    wind: OwmWind
    clouds: OwmClouds
    sys: OwmSys

    @field_validator("weather", mode="before")
    @classmethod
    def keep_primary_condition(cls, value: Any) -> Any:
        """Only the first condition is read, so only it is validated."""
        if isinstance(value, list):
            return value[:1]
        return value
