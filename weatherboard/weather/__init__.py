"""Weather module for fetching and normalizing weather data."""

from .codes import WeatherInfo, get_weather_info
from .errors import (
    BadResponse,
    MissingCredential,
    NetworkFailure,
    ParseFailure,
    WeatherError,
)
from .formatting import format_date, icon_for_description, ms_to_kmh
from .open_meteo import fetch_primary
from .openweather import fetch_fallback
from .views import (
    CurrentConditions,
    DailyForecastEntry,
    RichWeather,
    SimpleWeather,
    WeatherPayload,
)

__all__ = [
    "BadResponse",
    "CurrentConditions",
    "DailyForecastEntry",
    "MissingCredential",
    "NetworkFailure",
    "ParseFailure",
    "RichWeather",
    "SimpleWeather",
    "WeatherError",
    "WeatherInfo",
    "WeatherPayload",
    "fetch_fallback",
    "fetch_primary",
    "format_date",
    "get_weather_info",
    "icon_for_description",
    "ms_to_kmh",
]
