"""Maharashtra Weather - current conditions and a 9-day forecast for Maharashtra cities.

Architecture::

    reference/     Static data (city registry, WMO weather code labels)
    datasources/   Open-Meteo forecast client and response schema
    services/      Shared HTTP session
    renderers/     Pure data → view records → HTML (Jinja2 templates)
    widget.py      City selection / fetch state machine and its view
    web.py         Interactive page over http.server
    flows/         Prefect orchestration (static page build)

Data flow: reference → datasources → renderers → widget view → page
"""

__version__ = "0.1.0"

from maharashtra_weather.config import Settings

__all__ = ["Settings", "__version__"]
