"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Response schema
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions go through the shared session and translate transport
problems into ``maharashtra_weather.errors`` types::

       from maharashtra_weather.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()
"""
