"""Static reference data.

Data that never changes with API calls: the city registry and the WMO
weather code labels.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from maharashtra_weather.reference.cities import CITIES as CITIES
from maharashtra_weather.reference.cities import City as City
from maharashtra_weather.reference.cities import city_choices as city_choices
from maharashtra_weather.reference.cities import resolve as resolve
from maharashtra_weather.reference.weather_codes import WEATHER_CODES as WEATHER_CODES
from maharashtra_weather.reference.weather_codes import condition_label as condition_label
