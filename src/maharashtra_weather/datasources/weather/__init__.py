"""Open-Meteo weather data source.

Fetches current conditions plus a 9-day daily window (2 past days, today,
6 ahead) from Open-Meteo (free, no API key).

Public API:
  - forecast: fetch_forecast, parse_forecast, fetch_city_forecast
  - models: ForecastResponse, CurrentConditions, DailySeries, DailyForecastEntry
  - client: API URL, requested variables
"""

from maharashtra_weather.datasources.weather.client import OPEN_METEO_API
from maharashtra_weather.datasources.weather.forecast import (
    fetch_city_forecast,
    fetch_forecast,
    parse_forecast,
)
from maharashtra_weather.datasources.weather.models import (
    CurrentConditions,
    DailyForecastEntry,
    DailySeries,
    DayBadge,
    ForecastResponse,
)

__all__ = [
    "OPEN_METEO_API",
    "CurrentConditions",
    "DailyForecastEntry",
    "DailySeries",
    "DayBadge",
    "ForecastResponse",
    "fetch_city_forecast",
    "fetch_forecast",
    "parse_forecast",
]
