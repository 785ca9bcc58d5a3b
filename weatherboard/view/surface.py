from __future__ import annotations

from enum import StrEnum
from typing import Iterable, Protocol

from pydantic import BaseModel, ConfigDict


class Slot(StrEnum):
    """Named display slots of the weather view."""

    TEMPERATURE = "temperature"
    FEELS_LIKE = "feelsLike"
    HUMIDITY = "humidity"
    WIND_SPEED = "windSpeed"
    LOCATION = "location"
    ICON = "weatherIcon"
    DESCRIPTION = "weatherDescription"
    FORECAST = "weatherForecast"

    LOADING = "weatherLoading"
    CONTENT = "weatherContent"
    ERROR = "weatherError"


TEXT_SLOTS = (
    Slot.TEMPERATURE,
    Slot.FEELS_LIKE,
    Slot.HUMIDITY,
    Slot.WIND_SPEED,
    Slot.LOCATION,
    Slot.ICON,
    Slot.DESCRIPTION,
)

CONTAINER_SLOTS = (Slot.LOADING, Slot.CONTENT, Slot.ERROR)


class ForecastCard(BaseModel):
    """One rendered forecast day."""

    model_config = ConfigDict(frozen=True)

    date_label: str
    icon: str
    description: str
    temp_max: str
    temp_min: str
    precipitation: str | None = None


class ViewSurface(Protocol):
    """Anything the renderer can write into. Slots may be missing."""

    def has_slot(self, slot: Slot) -> bool: ...

    def set_text(self, slot: Slot, text: str) -> None: ...

    def set_visible(self, slot: Slot, visible: bool) -> None: ...

    def clear(self, slot: Slot) -> None: ...

    def append(self, slot: Slot, card: ForecastCard) -> None: ...

    async def flush(self) -> None: ...


class MemoryViewSurface:
    """In-memory view state. Writing to a slot it does not have raises KeyError."""

    def __init__(self, slots: Iterable[Slot] | None = None):
        self._slots = frozenset(slots) if slots is not None else frozenset(Slot)
        self.texts: dict[Slot, str] = {}
        self.visible: dict[Slot, bool] = {}
        self.cards: dict[Slot, list[ForecastCard]] = {}

    @property
    def slots(self) -> frozenset[Slot]:
        return self._slots

    def has_slot(self, slot: Slot) -> bool:
        return slot in self._slots

    def set_text(self, slot: Slot, text: str) -> None:
        self._require(slot)
        self.texts[slot] = text

    def set_visible(self, slot: Slot, visible: bool) -> None:
        self._require(slot)
        self.visible[slot] = visible

    def clear(self, slot: Slot) -> None:
        self._require(slot)
        self.texts.pop(slot, None)
        self.cards[slot] = []

    def append(self, slot: Slot, card: ForecastCard) -> None:
        self._require(slot)
        self.cards.setdefault(slot, []).append(card)

    async def flush(self) -> None:
        pass

    def text(self, slot: Slot) -> str | None:
        return self.texts.get(slot)

    def is_visible(self, slot: Slot) -> bool:
        return self.visible.get(slot, False)

    def forecast(self) -> list[ForecastCard]:
        return list(self.cards.get(Slot.FORECAST, []))

    def _require(self, slot: Slot) -> None:
        if slot not in self._slots:
            raise KeyError(f"View has no slot {slot.value!r}")
