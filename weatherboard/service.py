from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

import aiohttp

from weatherboard.config import Coordinates, WeatherSettings
from weatherboard.shared import LoggingMixin
from weatherboard.view import WeatherRenderer
from weatherboard.weather import (
    RichWeather,
    SimpleWeather,
    WeatherError,
    WeatherPayload,
    fetch_fallback,
    fetch_primary,
)

PrimaryFetcher = Callable[..., Awaitable[RichWeather]]
FallbackFetcher = Callable[..., Awaitable[SimpleWeather]]
Attempt = tuple[str, Callable[[], Awaitable[WeatherPayload]]]


class WeatherService(LoggingMixin):
    """
    Loads the weather and keeps the view fresh.

    With an OpenWeatherMap key configured, OpenWeatherMap is tried first and
    Open-Meteo is the second attempt. Without one, only Open-Meteo is used.
    Refresh cycles are not serialized: a slow cycle may finish after a newer
    one and its render wins.
    """

    def __init__(
        self,
        settings: WeatherSettings,
        renderer: WeatherRenderer,
        session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession,
        primary: PrimaryFetcher = fetch_primary,
        fallback: FallbackFetcher = fetch_fallback,
    ):
        self.settings = settings
        self.renderer = renderer
        self._session_factory = session_factory
        self._primary = primary
        self._fallback = fallback

        self._refresh_task: Optional[asyncio.Task] = None
        self._in_flight: set[asyncio.Task] = set()

    async def get_location(self) -> Coordinates:
        """The deployment's fixed coordinates. Never fails."""
        return self.settings.coordinates

    async def load_weather(self) -> Optional[WeatherPayload]:
        """Run one load cycle: at most two attempts, then render or show the error."""
        location = await self.get_location()
        self.logger.info(
            "Location obtained: %.4f, %.4f", location.latitude, location.longitude
        )

        async with self._session_factory() as session:
            attempts = self._plan_attempts(location, session)

            for index, (source, attempt) in enumerate(attempts):
                self.logger.info("Fetching weather from %s", source)
                try:
                    payload = await attempt()
                    self.renderer.render(payload)
                except WeatherError as e:
                    if index + 1 < len(attempts):
                        next_source = attempts[index + 1][0]
                        self.logger.warning(
                            "%s failed, trying %s: %s", source, next_source, e
                        )
                    else:
                        self.logger.warning("%s failed: %s", source, e)
                    continue

                self.logger.info("Weather updated from %s", source)
                await self.renderer.flush()
                return payload

        self.logger.error("Could not load weather data from any source")
        self.renderer.show_error()
        await self.renderer.flush()
        return None

    # =========================================================================
    # Periodic refresh
    # =========================================================================

    async def run(self, iterations: Optional[int] = None) -> None:
        """Load now, then again every refresh interval. Waits for started cycles."""
        interval = self.settings.refresh_interval_seconds
        self.renderer.show_loading()
        await self.renderer.flush()
        self.logger.info("Starting weather refresh every %.0f seconds", interval)

        started = 0
        while iterations is None or started < iterations:
            self._start_cycle()
            started += 1
            if iterations is not None and started >= iterations:
                break
            await asyncio.sleep(interval)

        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    def start(self) -> None:
        """Start the refresh loop in the background."""
        if self._refresh_task and not self._refresh_task.done():
            self.logger.warning("Weather refresh already running")
            return
        self._refresh_task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        """Stop the refresh loop and cancel cycles still waiting on the network."""
        tasks = list(self._in_flight)
        if self._refresh_task:
            tasks.append(self._refresh_task)

        for task in tasks:
            task.cancel()

        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:  # NOSONAR
                pass

        self._refresh_task = None
        self._in_flight.clear()
        self.logger.info("Weather refresh stopped")

    @property
    def is_running(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _plan_attempts(
        self, location: Coordinates, session: aiohttp.ClientSession
    ) -> list[Attempt]:
        settings = self.settings

        def primary() -> Awaitable[WeatherPayload]:
            return self._primary(
                location.latitude,
                location.longitude,
                session=session,
                timezone=settings.timezone,
                forecast_days=settings.forecast_days,
                location_label=settings.location_label,
            )

        def fallback() -> Awaitable[WeatherPayload]:
            return self._fallback(
                location.latitude,
                location.longitude,
                settings.openweather_api_key,
                session=session,
            )

        if settings.has_fallback_credential:
            return [("OpenWeatherMap", fallback), ("Open-Meteo", primary)]
        return [("Open-Meteo", primary)]

    def _start_cycle(self) -> asyncio.Task:
        task = asyncio.create_task(self._guarded_load())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _guarded_load(self) -> None:
        try:
            await self.load_weather()
        except Exception:
            self.logger.exception("Unexpected error while loading weather")
            self.renderer.show_error()
            await self.renderer.flush()
