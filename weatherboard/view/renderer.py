from __future__ import annotations

from weatherboard.shared import LoggingMixin
from weatherboard.view.surface import (
    CONTAINER_SLOTS,
    TEXT_SLOTS,
    ForecastCard,
    Slot,
    ViewSurface,
)
from weatherboard.weather.codes import get_weather_info
from weatherboard.weather.formatting import format_date, icon_for_description
from weatherboard.weather.views import (
    DailyForecastEntry,
    RichWeather,
    SimpleWeather,
    WeatherPayload,
)


class WeatherRenderer(LoggingMixin):
    """
    Projects weather payloads onto a view surface.

    The view is always in exactly one of three states: loading, content or
    error. Slots the surface does not have are skipped. State changes are
    synchronous; `flush` publishes them to the surface.
    """

    def __init__(self, surface: ViewSurface):
        self.surface = surface

    def show_loading(self) -> None:
        self._show_only(Slot.LOADING)

    def render(self, payload: WeatherPayload) -> None:
        match payload:
            case RichWeather():
                # Built up front so a bad date cannot leave a half-drawn view
                cards = [build_forecast_card(day) for day in payload.daily]
                self._show_only(Slot.CONTENT)
                self._render_rich(payload, cards)
            case SimpleWeather():
                self._show_only(Slot.CONTENT)
                self._render_simple(payload)
            case _:
                raise TypeError(f"Unsupported weather payload: {type(payload)!r}")

    def show_error(self) -> None:
        self._show_only(Slot.ERROR)

        # No stale values may outlive a switch to the error state
        for slot in TEXT_SLOTS:
            self._clear(slot)
        self._clear(Slot.FORECAST)

    async def flush(self) -> None:
        await self.surface.flush()

    # =========================================================================
    # Payload variants
    # =========================================================================

    def _render_rich(self, weather: RichWeather, cards: list[ForecastCard]) -> None:
        current = weather.current
        self._set_current_fields(
            temperature=current.temperature,
            feels_like=current.feels_like,
            humidity=current.humidity,
            wind_speed=current.wind_speed,
            location=weather.location,
        )

        info = get_weather_info(current.weather_code)
        self._set_text(Slot.ICON, info.icon)
        self._set_text(Slot.DESCRIPTION, info.description)

        if not self.surface.has_slot(Slot.FORECAST):
            self.logger.debug("No forecast container, skipping forecast")
            return

        self.surface.clear(Slot.FORECAST)
        for card in cards:
            self.surface.append(Slot.FORECAST, card)

    def _render_simple(self, weather: SimpleWeather) -> None:
        self._set_current_fields(
            temperature=weather.temperature,
            feels_like=weather.feels_like,
            humidity=weather.humidity,
            wind_speed=weather.wind_speed,
            location=weather.location,
        )
        self._set_text(Slot.ICON, icon_for_description(weather.description))
        self._set_text(Slot.DESCRIPTION, weather.description)

        # A simple payload has no forecast, so drop any left from a rich render
        self._clear(Slot.FORECAST)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _set_current_fields(
        self,
        temperature: int,
        feels_like: int,
        humidity: int,
        wind_speed: int,
        location: str,
    ) -> None:
        self._set_text(Slot.TEMPERATURE, str(temperature))
        self._set_text(Slot.FEELS_LIKE, str(feels_like))
        self._set_text(Slot.HUMIDITY, str(humidity))
        self._set_text(Slot.WIND_SPEED, str(wind_speed))
        self._set_text(Slot.LOCATION, location)

    def _show_only(self, visible_slot: Slot) -> None:
        for slot in CONTAINER_SLOTS:
            if self.surface.has_slot(slot):
                self.surface.set_visible(slot, slot is visible_slot)

    def _set_text(self, slot: Slot, text: str) -> None:
        if not self.surface.has_slot(slot):
            self.logger.debug("Slot %s missing, skipping", slot.value)
            return
        self.surface.set_text(slot, text)

    def _clear(self, slot: Slot) -> None:
        if self.surface.has_slot(slot):
            self.surface.clear(slot)


def build_forecast_card(day: DailyForecastEntry) -> ForecastCard:
    """Build the display card for one forecast day."""
    info = get_weather_info(day.weather_code)
    precipitation = None
    if day.precipitation is not None and day.precipitation > 0:
        precipitation = f"💧 {format_amount(day.precipitation)}mm"
    return ForecastCard(
        date_label=format_date(day.date),
        icon=info.icon,
        description=info.description,
        temp_max=_degrees(day.temp_max),
        temp_min=_degrees(day.temp_min),
        precipitation=precipitation,
    )


def format_amount(value: float) -> str:
    """2.4 -> '2.4', 3.0 -> '3'."""
    return f"{value:g}"


def _degrees(value: int | None) -> str:
    return "-°" if value is None else f"{value}°"
