"""Forecast -> presentation records.

Turns a validated ``ForecastResponse`` into the ``WeatherReport`` the page
and the CLI display. Same input, same output: nothing here reads the
clock unless ``today`` is left out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maharashtra_weather.renderers.date_utils import day_name, format_update_time, short_date
from maharashtra_weather.renderers.weather_utils import (
    format_degrees,
    format_precipitation,
    format_temperature,
    format_wind_speed,
    wmo_code_to_conditions,
)
from maharashtra_weather.schemas import CurrentView, ForecastDayView, WeatherReport

if TYPE_CHECKING:
    from datetime import date

    from maharashtra_weather.datasources.weather.models import (
        CurrentConditions,
        DailyForecastEntry,
        DailySeries,
        ForecastResponse,
    )
    from maharashtra_weather.reference.cities import City


def build_current_view(city_name: str, current: CurrentConditions) -> CurrentView:
    """Build the weather card record."""
    return CurrentView(
        city_name=city_name,
        temperature=format_temperature(current.temperature_2m),
        wind_speed=format_wind_speed(current.wind_speed_10m),
        condition=wmo_code_to_conditions(current.weather_code),
        last_updated=f"Updated: {format_update_time(current.time)}",
    )


def build_forecast_day_view(entry: DailyForecastEntry, today: date) -> ForecastDayView:
    """Build one forecast card record."""
    badge = entry.badge(today)
    return ForecastDayView(
        badge_class=badge.value,
        badge_text=badge.label,
        day_name=day_name(entry.date),
        date_label=short_date(entry.date),
        condition=wmo_code_to_conditions(entry.weather_code),
        temp_max=format_degrees(entry.temp_max_c),
        temp_min=format_degrees(entry.temp_min_c),
        precipitation=format_precipitation(entry.precipitation_mm),
    )


def build_forecast_views(daily: DailySeries, today: date) -> list[ForecastDayView]:
    """One record per day, in the order the provider returned them."""
    return [build_forecast_day_view(entry, today) for entry in daily.entries()]


def build_report(
    city: City,
    forecast: ForecastResponse,
    today: date | None = None,
) -> WeatherReport:
    """Build the full report for a city.

    ``today`` defaults to the current date in the city's time zone.
    """
    if today is None:
        today = forecast.local_today()
    return WeatherReport(
        city_id=city.id,
        current=build_current_view(city.name, forecast.current),
        forecast=build_forecast_views(forecast.daily, today),
    )


def format_report_text(report: WeatherReport) -> str:
    """Plain-text rendering for terminals."""
    current = report.current
    lines = [
        current.city_name,
        f"  {current.condition}, {current.temperature}, wind {current.wind_speed}",
        f"  {current.last_updated}",
        "",
    ]
    for day in report.forecast:
        lines.append(
            f"  {day.badge_text:<9} {day.day_name} {day.date_label:<7} "
            f"{day.temp_max:>4} / {day.temp_min:<4} {day.precipitation:>7}  {day.condition}"
        )
    return "\n".join(lines)
