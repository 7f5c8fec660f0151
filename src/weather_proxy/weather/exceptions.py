"""Errors raised while fetching and shaping upstream weather data."""

from typing import List, Optional


class WeatherFetchError(Exception):
    """Base class for failures that prevent building a weather summary."""
    pass


class TransportError(WeatherFetchError):
    """Raised when the upstream provider cannot be reached or refuses the request."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(WeatherFetchError):
    """Raised when the upstream body is not valid JSON."""
    pass


class ShapeError(WeatherFetchError):
    """Raised when the upstream JSON lacks expected fields or has mistyped ones."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("Unexpected upstream response shape: " + "; ".join(problems))


class DeadlineExceeded(WeatherFetchError):
    """Raised when the fetch does not finish within its time budget."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Weather fetch exceeded {timeout:g}s deadline")


class InvalidParameterError(ValueError):
    """Raised when a query parameter is missing or not a number."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
