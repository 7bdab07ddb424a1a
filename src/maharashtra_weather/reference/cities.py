"""Maharashtra cities offered by the lookup widget."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class City:
    """A selectable location with its coordinates in decimal degrees."""

    id: str
    name: str
    latitude: float
    longitude: float


# Insertion order is the order shown in the city picker.
CITIES: dict[str, City] = {
    c.id: c
    for c in (
        City("mumbai", "Mumbai", 19.0760, 72.8777),
        City("pune", "Pune", 18.5204, 73.8567),
        City("nagpur", "Nagpur", 21.1458, 79.0882),
        City("nashik", "Nashik", 19.9975, 74.1860),
        City("aurangabad", "Aurangabad", 19.8762, 75.3433),
        City("kolhapur", "Kolhapur", 16.7050, 74.2314),
        City("solapur", "Solapur", 17.6599, 75.9064),
        City("sangli", "Sangli", 16.8538, 74.5854),
        City("satara", "Satara", 17.6745, 73.9850),
        City("ahmednagar", "Ahmednagar", 19.0950, 74.7421),
        City("jalna", "Jalna", 19.8480, 75.8809),
        City("parbhani", "Parbhani", 19.2683, 76.7597),
        City("beed", "Beed", 18.9981, 76.4719),
        City("latur", "Latur", 18.4088, 76.5246),
        City("washim", "Washim", 20.1063, 76.9219),
        City("buldhana", "Buldhana", 20.5229, 76.1795),
        City("akola", "Akola", 20.7136, 77.0169),
        City("amravati", "Amravati", 20.8449, 77.7540),
        City("yavatmal", "Yavatmal", 20.4183, 78.1354),
        City("wardha", "Wardha", 20.7465, 78.6033),
        City("chandrapur", "Chandrapur", 19.2783, 79.3068),
        City("gondia", "Gondia", 21.4447, 80.1854),
        City("nanded", "Nanded", 19.1610, 77.3268),
        City("ratnagiri", "Ratnagiri", 16.9891, 73.2993),
        City("thane", "Thane", 19.2183, 72.9781),
    )
}


def resolve(city_id: str | None) -> City | None:
    """Look up a city by id.

    Returns None for an empty or unknown id, which callers treat as
    "no city selected".
    """
    if not city_id:
        return None
    return CITIES.get(city_id)


def city_choices() -> list[tuple[str, str]]:
    """Return ``(id, display name)`` pairs in picker order."""
    return [(c.id, c.name) for c in CITIES.values()]
