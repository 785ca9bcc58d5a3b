import logging

import aiohttp
from pydantic import ValidationError

from weatherboard.config import Coordinates
from weatherboard.weather.errors import MissingCredential, ParseFailure
from weatherboard.weather.formatting import (
    format_coordinates,
    ms_to_kmh,
    round_half_up,
)
from weatherboard.weather.http import get_json
from weatherboard.weather.views import OpenWeatherApiResponse, SimpleWeather

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


async def fetch_fallback(
    latitude: float,
    longitude: float,
    api_key: str | None,
    *,
    session: aiohttp.ClientSession | None = None,
    units: str = "metric",
    lang: str = "pt_br",
) -> SimpleWeather:
    """Fetch current weather from OpenWeatherMap. Requires an API key."""
    if not api_key:
        raise MissingCredential("OpenWeatherMap API key is not configured")

    if session is None:
        async with aiohttp.ClientSession() as owned_session:
            return await fetch_fallback(
                latitude,
                longitude,
                api_key,
                session=owned_session,
                units=units,
                lang=lang,
            )

    params = {
        "lat": str(latitude),
        "lon": str(longitude),
        "appid": api_key,
        "units": units,
        "lang": lang,
    }

    raw_data = await get_json(
        session, OPENWEATHER_URL, params, source="OpenWeatherMap"
    )

    try:
        api_response = OpenWeatherApiResponse.model_validate(raw_data)
    except ValidationError as e:
        raise ParseFailure(f"Unexpected OpenWeatherMap response: {e}") from e

    return transform_api_response(
        api_response, Coordinates(latitude=latitude, longitude=longitude)
    )


def transform_api_response(
    api_response: OpenWeatherApiResponse, coordinates: Coordinates
) -> SimpleWeather:
    condition = api_response.weather[0]
    return SimpleWeather(
        temperature=round_half_up(api_response.main.temp),
        feels_like=round_half_up(api_response.main.feels_like),
        humidity=round_half_up(api_response.main.humidity),
        wind_speed=ms_to_kmh(api_response.wind.speed),
        description=condition.description,
        icon=condition.icon,
        location=api_response.name or format_coordinates(coordinates),
    )
