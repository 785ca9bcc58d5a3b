from .env import WeatherEnv
from .models import (
    DEFAULT_COORDINATES,
    DEFAULT_LOCATION_LABEL,
    Coordinates,
    WeatherSettings,
)

__all__ = [
    "DEFAULT_COORDINATES",
    "DEFAULT_LOCATION_LABEL",
    "Coordinates",
    "WeatherEnv",
    "WeatherSettings",
]
