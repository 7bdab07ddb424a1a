"""Weather formatting helpers for renderers.

Pure conversion functions with no external dependencies. Rounding is
half-up (2.5 -> 3, -2.5 -> -2) so labels match what browsers show.
"""

from __future__ import annotations

import math

from maharashtra_weather.reference.weather_codes import condition_label


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals, ties toward positive infinity."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def _number(value: float) -> str:
    """Render a rounded number without a trailing ``.0``."""
    if value == int(value):
        return str(int(value))
    return f"{value:.1f}"


def format_temperature(celsius: float) -> str:
    """Whole-degree temperature, e.g. ``22°C``."""
    return f"{_number(round_half_up(celsius))}°C"


def format_degrees(celsius: float) -> str:
    """Whole-degree temperature without unit, e.g. ``31°``."""
    return f"{_number(round_half_up(celsius))}°"


def format_wind_speed(kmh: float) -> str:
    """Whole-unit wind speed, e.g. ``13 km/h``."""
    return f"{_number(round_half_up(kmh))} km/h"


def format_precipitation(mm: float) -> str:
    """Precipitation to one decimal, e.g. ``2.3 mm`` (``0 mm`` when dry)."""
    return f"{_number(round_half_up(mm, 1))} mm"


def wmo_code_to_conditions(code: int) -> str:
    """Convert a WMO weather code to a human-readable condition string."""
    return condition_label(code)
