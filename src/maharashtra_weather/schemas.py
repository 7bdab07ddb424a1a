"""
Presentation records.

Pydantic models for what the page shows. Renderers build these from a
validated forecast; templates and the text report only read them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CurrentView(BaseModel):
    """The weather card: current conditions for the selected city."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    temperature: str = Field(..., description="e.g. '22°C'")
    wind_speed: str = Field(..., description="e.g. '13 km/h'")
    condition: str
    last_updated: str = Field(..., description="e.g. 'Updated: 02:30:00 pm'")


class ForecastDayView(BaseModel):
    """One card in the forecast strip."""

    model_config = ConfigDict(frozen=True)

    badge_class: str
    badge_text: str
    day_name: str
    date_label: str
    condition: str
    temp_max: str
    temp_min: str
    precipitation: str


class WeatherReport(BaseModel):
    """Everything rendered after one successful lookup."""

    model_config = ConfigDict(frozen=True)

    city_id: str
    current: CurrentView
    forecast: list[ForecastDayView] = Field(default_factory=list)
