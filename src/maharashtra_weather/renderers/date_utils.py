"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date, datetime


def format_update_time(timestamp: str) -> str:
    """Observation time as ``hh:mm:ss am``.

    The provider sends local ISO times like ``2024-06-10T14:30``. Anything
    that does not parse is returned unchanged.
    """
    try:
        dt = datetime.fromisoformat(timestamp)
    except (TypeError, ValueError):
        return timestamp
    return dt.strftime("%I:%M:%S %p").lower()


def day_name(day: date) -> str:
    """Short weekday, e.g. ``Mon``."""
    return day.strftime("%a")


def short_date(day: date) -> str:
    """Day then short month, e.g. ``10 Jun``."""
    return f"{day.day} {day.strftime('%b')}"
