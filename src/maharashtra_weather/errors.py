"""Error types raised by the lookup pipeline.

Everything the widget can recover from derives from ``WeatherLookupError``.
The page shows a single message for all of them; the concrete class is
only visible in logs.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for lookup failures."""


class NoCitySelectedError(WeatherLookupError):
    """No city (or an unknown city id) was selected. Raised before any request."""

    def __init__(self, city_id: str | None = None) -> None:
        self.city_id = city_id
        super().__init__("Please select a city first!")


class NetworkError(WeatherLookupError):
    """The request failed in transport or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(WeatherLookupError):
    """The provider answered, but the body does not match the expected schema."""
