"""Weather lookups: geocoding, daily forecast and weather-code labels."""

from .client import WeatherClient
from .codes import UNKNOWN_WEATHER, WEATHER_CODES, describe_code
from .models import (
    Coordinates,
    DailyForecast,
    DayForecast,
    WeatherError,
    WeatherQueryResult,
    WeatherReport,
)

__all__ = [
    "WeatherClient",
    "UNKNOWN_WEATHER",
    "WEATHER_CODES",
    "describe_code",
    "Coordinates",
    "DailyForecast",
    "DayForecast",
    "WeatherError",
    "WeatherQueryResult",
    "WeatherReport",
]
