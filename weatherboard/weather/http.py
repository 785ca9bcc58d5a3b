import asyncio
import json
import logging
from typing import Any

import aiohttp

from weatherboard.weather.errors import BadResponse, NetworkFailure, ParseFailure

logger = logging.getLogger(__name__)


async def get_json(
    session: aiohttp.ClientSession,
    url: str,
    params: dict[str, str],
    source: str,
) -> Any:
    """Single GET round trip, with failures mapped onto WeatherError kinds."""
    try:
        async with session.get(url, params=params) as response:
            if response.status != 200:
                raise BadResponse(response.status, source)

            try:
                return await response.json()
            except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
                raise ParseFailure(f"{source} returned a non-JSON body") from e

    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.debug("Request to %s failed: %r", source, e)
        raise NetworkFailure(f"Could not reach {source}: {e}") from e
