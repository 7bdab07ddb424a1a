"""Widget page renderers.

The weather card, the forecast strip, and the full page that hosts the
city picker around them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maharashtra_weather.reference.cities import city_choices
from maharashtra_weather.renderers import render_template

if TYPE_CHECKING:
    from maharashtra_weather.schemas import CurrentView, ForecastDayView
    from maharashtra_weather.widget import WidgetView


def build_weather_card_html(current: CurrentView | None) -> str:
    """Build the current-conditions card. Hidden when there is nothing to show."""
    return render_template("weather_card.html.j2", current=current)


def build_forecast_html(days: list[ForecastDayView]) -> str:
    """Build the forecast strip, one card per day."""
    return render_template("forecast.html.j2", days=days)


def build_page_html(view: WidgetView, selected_city_id: str | None = None) -> str:
    """Build the full widget page for the given view state."""
    return render_template(
        "page.html.j2",
        cities=city_choices(),
        selected_city_id=selected_city_id or "",
        error=view.error,
        loading=view.loading,
        weather_card=build_weather_card_html(view.current),
        forecast=build_forecast_html(view.forecast),
    )
