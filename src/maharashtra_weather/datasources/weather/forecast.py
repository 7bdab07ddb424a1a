"""Current conditions and daily forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pydantic
import requests

from maharashtra_weather.datasources.weather.client import (
    CURRENT_VARS,
    DAILY_VARS,
    FORECAST_DAYS,
    OPEN_METEO_API,
    PAST_DAYS,
)
from maharashtra_weather.datasources.weather.models import ForecastResponse
from maharashtra_weather.errors import MalformedResponseError, NetworkError
from maharashtra_weather.services.http import session

if TYPE_CHECKING:
    from maharashtra_weather.reference.cities import City

logger = logging.getLogger(__name__)


def build_params(lat: float, lon: float) -> dict[str, str | int | float]:
    """Query parameters for one city: 2 past days, today and 6 days ahead."""
    return {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_VARS),
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
        "past_days": PAST_DAYS,
        "forecast_days": FORECAST_DAYS,
    }


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    url: str = OPEN_METEO_API,
) -> dict[str, Any]:
    """
    Fetch current conditions and the daily forecast from Open-Meteo.

    Args:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees.
        url: Forecast endpoint.

    Returns:
        Raw API response dict with ``current`` and ``daily`` keys.

    Raises:
        NetworkError: Transport failure or non-success HTTP status.
        MalformedResponseError: The body is not JSON.
    """
    params = build_params(lat, lon)
    logger.debug("GET %s lat=%s lon=%s", url, lat, lon)

    try:
        resp = session.get(url, params=params)
    except requests.RequestException as exc:
        raise NetworkError(f"Request failed: {exc}") from exc

    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise NetworkError(f"HTTP Error: {resp.status_code}", status_code=resp.status_code) from exc

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise MalformedResponseError("Response body is not valid JSON") from exc
    return result


def parse_forecast(payload: Any) -> ForecastResponse:
    """
    Validate a raw payload against the forecast schema.

    Raises:
        MalformedResponseError: ``current`` or ``daily`` is missing, or a
            field has the wrong type or length.
    """
    if not isinstance(payload, dict) or "current" not in payload or "daily" not in payload:
        raise MalformedResponseError("Invalid API response structure")
    try:
        return ForecastResponse.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise MalformedResponseError(
            f"Invalid API response structure ({exc.error_count()} field errors)"
        ) from exc


def fetch_city_forecast(
    city: City,
    *,
    url: str = OPEN_METEO_API,
) -> ForecastResponse:
    """Fetch and validate the forecast for a registry city."""
    payload = fetch_forecast(city.latitude, city.longitude, url=url)
    return parse_forecast(payload)
