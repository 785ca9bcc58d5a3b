import logging
from typing import Callable

import aiohttp
from pydantic import ValidationError

from weatherboard.config import DEFAULT_LOCATION_LABEL
from weatherboard.weather.errors import ParseFailure
from weatherboard.weather.formatting import ms_to_kmh, round_half_up
from weatherboard.weather.http import get_json
from weatherboard.weather.views import (
    CurrentConditions,
    DailyForecastEntry,
    OpenMeteoApiResponse,
    OpenMeteoCurrentResponse,
    OpenMeteoDailyResponse,
    RichWeather,
)

logger = logging.getLogger(__name__)

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

_CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "weather_code,wind_speed_10m"
)
_DAILY_FIELDS = (
    "temperature_2m_max,temperature_2m_min,weather_code,"
    "precipitation_sum,wind_speed_10m_max"
)


async def fetch_primary(
    latitude: float,
    longitude: float,
    *,
    session: aiohttp.ClientSession | None = None,
    timezone: str = "Europe/Lisbon",
    forecast_days: int = 5,
    location_label: str = DEFAULT_LOCATION_LABEL,
) -> RichWeather:
    """Fetch current weather and the daily forecast from Open-Meteo (no key needed)."""
    if session is None:
        async with aiohttp.ClientSession() as owned_session:
            return await fetch_primary(
                latitude,
                longitude,
                session=owned_session,
                timezone=timezone,
                forecast_days=forecast_days,
                location_label=location_label,
            )

    params = {
        "latitude": str(latitude),
        "longitude": str(longitude),
        "current": _CURRENT_FIELDS,
        "daily": _DAILY_FIELDS,
        "timezone": timezone,
        "wind_speed_unit": "ms",
        "forecast_days": str(forecast_days),
    }

    raw_data = await get_json(session, OPEN_METEO_URL, params, source="Open-Meteo")

    try:
        api_response = OpenMeteoApiResponse.model_validate(raw_data)
    except ValidationError as e:
        raise ParseFailure(f"Unexpected Open-Meteo response: {e}") from e

    weather = transform_api_response(api_response, location_label)
    logger.debug("Open-Meteo returned %d forecast days", len(weather.daily))
    return weather


def transform_api_response(
    api_response: OpenMeteoApiResponse, location_label: str
) -> RichWeather:
    """Transform the Open-Meteo response into the rich payload."""
    return RichWeather(
        current=_transform_current(api_response.current),
        daily=_transform_daily(api_response.daily),
        location=location_label,
    )


def _transform_current(api_current: OpenMeteoCurrentResponse) -> CurrentConditions:
    return CurrentConditions(
        temperature=round_half_up(api_current.temperature_2m),
        feels_like=round_half_up(api_current.apparent_temperature),
        humidity=round_half_up(api_current.relative_humidity_2m),
        wind_speed=ms_to_kmh(api_current.wind_speed_10m),
        weather_code=api_current.weather_code,
    )


def _transform_daily(api_daily: OpenMeteoDailyResponse) -> list[DailyForecastEntry]:
    columns = [
        api_daily.temperature_2m_max,
        api_daily.temperature_2m_min,
        api_daily.weather_code,
        api_daily.precipitation_sum,
        api_daily.wind_speed_10m_max,
    ]
    if any(len(column) != len(api_daily.time) for column in columns):
        raise ParseFailure("Open-Meteo daily arrays are not aligned")

    return [
        DailyForecastEntry(
            date=day,
            temp_max=_maybe(round_half_up, api_daily.temperature_2m_max[i]),
            temp_min=_maybe(round_half_up, api_daily.temperature_2m_min[i]),
            weather_code=api_daily.weather_code[i],
            precipitation=api_daily.precipitation_sum[i],
            wind_speed=_maybe(ms_to_kmh, api_daily.wind_speed_10m_max[i]),
        )
        for i, day in enumerate(api_daily.time)
    ]


def _maybe(convert: Callable[[float], int], value: float | None) -> int | None:
    return None if value is None else convert(value)
