"""Configuration settings for the weather proxy service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Upstream API configuration
OWM_API_BASE_URL: str = os.getenv(
    "OWM_API_BASE_URL", "https://api.openweathermap.org/data/2.5/weather"
)
OWM_API_KEY: str = os.getenv("OWM_API_KEY", "")
OWM_UNITS: Final[str] = "metric"

# Budget for network + JSON decode + field extraction
FETCH_TIMEOUT_SECONDS: Final[float] = 5.0

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8080"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
