"""Shared fixtures: a realistic Open-Meteo forecast payload."""

from __future__ import annotations

from typing import Any

import pytest

DAYS = [f"2024-06-{d:02d}" for d in range(8, 17)]


def make_payload() -> dict[str, Any]:
    """Nine days around 2024-06-10, shaped like an Open-Meteo response."""
    return {
        "latitude": 18.5,
        "longitude": 73.875,
        "timezone": "Asia/Kolkata",
        "utc_offset_seconds": 19800,
        "current": {
            "time": "2024-06-10T14:30",
            "interval": 900,
            "temperature_2m": 21.6,
            "weather_code": 61,
            "wind_speed_10m": 13.4,
        },
        "daily": {
            "time": list(DAYS),
            "temperature_2m_max": [30.4, 31.5, 29.6, 28.0, 27.2, 28.9, 30.1, 31.0, 29.5],
            "temperature_2m_min": [22.1, 23.5, 22.0, 21.4, 21.0, 21.6, 22.2, 22.8, 22.0],
            "weather_code": [3, 61, 63, 80, 95, 2, 1, 0, 42],
            "precipitation_sum": [0.0, 2.34, 12.0, 5.55, 30.1, 0.4, 0.0, 0.0, 1.25],
        },
    }


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return make_payload()
