"""Open-Meteo API client constants and shared configuration.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Current-conditions variables we request
CURRENT_VARS = [
    "temperature_2m",
    "weather_code",
    "wind_speed_10m",
]

# Daily variables we request
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_sum",
]

# 2 past days + today + 6 upcoming days
PAST_DAYS = 2
FORECAST_DAYS = 7
