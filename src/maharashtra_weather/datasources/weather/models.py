"""Response schema for the Open-Meteo forecast endpoint.

The provider offers no typed contract, so the fields the widget reads are
declared here and validated when a response arrives. Anything that does
not fit is reported as a malformed response rather than half-rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class DayBadge(StrEnum):
    """Where a forecast day sits relative to today. Values double as CSS classes."""

    PAST = "past"
    TODAY = "today"
    FUTURE = "future"

    @property
    def label(self) -> str:
        return _BADGE_LABELS[self]


_BADGE_LABELS = {
    DayBadge.PAST: "Past",
    DayBadge.TODAY: "Today",
    DayBadge.FUTURE: "Forecast",
}


@dataclass(frozen=True)
class DailyForecastEntry:
    """One day of the daily series."""

    date: date
    temp_max_c: float
    temp_min_c: float
    weather_code: int
    precipitation_mm: float

    def badge(self, today: date) -> DayBadge:
        """Classify this day against ``today``."""
        if self.date < today:
            return DayBadge.PAST
        if self.date == today:
            return DayBadge.TODAY
        return DayBadge.FUTURE


class CurrentConditions(BaseModel):
    """The ``current`` block: latest observation at the city."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    time: str
    temperature_2m: float
    wind_speed_10m: float
    weather_code: int


_SERIES_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weather_code", "precipitation_sum")


class DailySeries(BaseModel):
    """The ``daily`` block: parallel arrays indexed by day offset."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    time: list[date]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    weather_code: list[int]
    precipitation_sum: list[float]

    @field_validator("precipitation_sum", mode="before")
    @classmethod
    def _missing_precipitation_is_zero(cls, value: object) -> object:
        # Open-Meteo reports null for days it has no precipitation data for
        if isinstance(value, list):
            return [0.0 if v is None else v for v in value]
        return value

    @model_validator(mode="after")
    def _check_parallel(self) -> DailySeries:
        n = len(self.time)
        for name in _SERIES_FIELDS:
            count = len(getattr(self, name))
            if count != n:
                raise ValueError(f"daily.{name} has {count} values, expected {n}")
        return self

    def entries(self) -> list[DailyForecastEntry]:
        """Zip the parallel arrays into per-day entries, in provider order."""
        return [
            DailyForecastEntry(
                date=self.time[i],
                temp_max_c=self.temperature_2m_max[i],
                temp_min_c=self.temperature_2m_min[i],
                weather_code=self.weather_code[i],
                precipitation_mm=self.precipitation_sum[i],
            )
            for i in range(len(self.time))
        ]


class ForecastResponse(BaseModel):
    """Validated forecast payload."""

    current: CurrentConditions
    daily: DailySeries
    timezone: str | None = None
    utc_offset_seconds: int | None = None

    def local_today(self, now: datetime | None = None) -> date:
        """Today's date in the time zone the provider resolved for the city.

        Falls back to the host's local date when the offset is absent.
        """
        if self.utc_offset_seconds is None:
            return (now or datetime.now()).date()
        utc_now = (now or datetime.now(UTC)).astimezone(UTC)
        return (utc_now + timedelta(seconds=self.utc_offset_seconds)).date()
