"""Current weather and 5-day forecast board for a fixed location."""

from weatherboard.config import Coordinates, WeatherEnv, WeatherSettings
from weatherboard.service import WeatherService
from weatherboard.view import (
    HtmlPageSurface,
    MemoryViewSurface,
    Slot,
    ViewSurface,
    WeatherRenderer,
)
from weatherboard.weather import RichWeather, SimpleWeather, WeatherPayload

__all__ = [
    "Coordinates",
    "HtmlPageSurface",
    "MemoryViewSurface",
    "RichWeather",
    "SimpleWeather",
    "Slot",
    "ViewSurface",
    "WeatherEnv",
    "WeatherPayload",
    "WeatherRenderer",
    "WeatherService",
    "WeatherSettings",
]
