"""
The weather lookup widget: city selection, fetch, and what is on screen.

State machine::

    Idle --fetch--> Loading --ok--> Rendered
                            --err-> ErrorShown
    any --select_city--> Idle

``WidgetView`` holds the output ports the page reads (error text, loading
flag, weather card, forecast strip). Every fetch takes a generation
token; a result arriving after the selection changed is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from maharashtra_weather.config import get_settings
from maharashtra_weather.datasources.weather.forecast import fetch_city_forecast
from maharashtra_weather.errors import NoCitySelectedError, WeatherLookupError
from maharashtra_weather.reference.cities import resolve
from maharashtra_weather.renderers.report import build_report

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    from maharashtra_weather.datasources.weather.models import ForecastResponse
    from maharashtra_weather.reference.cities import City
    from maharashtra_weather.schemas import CurrentView, ForecastDayView, WeatherReport

logger = logging.getLogger(__name__)


class WidgetState(StrEnum):
    """Lifecycle of a lookup."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERROR = "error"


@dataclass
class WidgetView:
    """What the page currently shows."""

    error: str | None = None
    loading: bool = False
    current: CurrentView | None = None
    forecast: list[ForecastDayView] = field(default_factory=list)

    def clear(self) -> None:
        self.error = None
        self.loading = False
        self.current = None
        self.forecast = []


def connection_error_message(exc: Exception) -> str:
    """The single user-facing message for any failed lookup."""
    return f"Connection Error: {exc}. Please check your internet connection and try again."


def _default_fetcher(city: City) -> ForecastResponse:
    settings = get_settings()
    return fetch_city_forecast(city, url=settings.open_meteo_url)


class WeatherWidget:
    """One city picker with its fetch button and result area."""

    def __init__(self, fetcher: Callable[[City], ForecastResponse] | None = None) -> None:
        self._fetcher = fetcher or _default_fetcher
        self._generation = 0
        self.selected_city_id: str | None = None
        self.state = WidgetState.IDLE
        self.view = WidgetView()

    @property
    def selected_city(self) -> City | None:
        return resolve(self.selected_city_id)

    def select_city(self, city_id: str | None) -> None:
        """Change the selection. Clears the display and orphans any fetch in flight."""
        self.selected_city_id = city_id or None
        self._generation += 1
        self.view.clear()
        self.state = WidgetState.IDLE

    def fetch(self, today: date | None = None) -> WidgetView:
        """
        Look up the selected city and update the view.

        Args:
            today: Date used for Past/Today/Forecast badges. Defaults to the
                current date in the city's time zone.

        Returns:
            The updated view.
        """
        city = self.selected_city
        if city is None:
            err = NoCitySelectedError(self.selected_city_id)
            logger.info("Fetch without a valid city (selected=%r)", self.selected_city_id)
            self.view.clear()
            self.view.error = str(err)
            self.state = WidgetState.ERROR
            return self.view

        self._generation += 1
        token = self._generation
        self.view.clear()
        self.view.loading = True
        self.state = WidgetState.LOADING

        try:
            report = build_report(city, self._fetcher(city), today=today)
        except WeatherLookupError as exc:
            if self._is_current(token):
                logger.error(
                    "Weather fetch failed for %s: %s: %s", city.id, type(exc).__name__, exc
                )
                self._show_error(connection_error_message(exc))
            else:
                logger.info("Dropping failed fetch for %s: selection changed", city.id)
        else:
            if self._is_current(token):
                self._show_report(report)
            else:
                logger.info("Dropping stale result for %s: selection changed", city.id)
        finally:
            if self._is_current(token):
                self.view.loading = False

        return self.view

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    def _show_error(self, message: str) -> None:
        self.view.current = None
        self.view.forecast = []
        self.view.error = message
        self.state = WidgetState.ERROR

    def _show_report(self, report: WeatherReport) -> None:
        self.view.error = None
        self.view.current = report.current
        self.view.forecast = list(report.forecast)
        self.state = WidgetState.RENDERED
        logger.debug("Rendered %d forecast days for %s", len(report.forecast), report.city_id)


def fetch_and_render(city_id: str | None, today: date | None = None) -> WidgetView:
    """Select ``city_id`` on a fresh widget and fetch it."""
    widget = WeatherWidget()
    widget.select_city(city_id)
    return widget.fetch(today=today)
