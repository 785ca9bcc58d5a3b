from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (Open-Meteo API Mappings)
# =============================================================================


class OpenMeteoCurrentResponse(BaseModel):
    """Direct mapping to Open-Meteo current weather API response."""

    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: float
    weather_code: int
    wind_speed_10m: float


class OpenMeteoDailyResponse(BaseModel):
    """Direct mapping to Open-Meteo daily forecast API response. Gaps come as null."""

    time: list[str]
    temperature_2m_max: list[float | None]
    temperature_2m_min: list[float | None]
    weather_code: list[int | None]
    precipitation_sum: list[float | None]
    wind_speed_10m_max: list[float | None]


class OpenMeteoApiResponse(BaseModel):
    """Open-Meteo response with the current and daily blocks we request."""

    current: OpenMeteoCurrentResponse
    daily: OpenMeteoDailyResponse


# =============================================================================
# API Response Models (OpenWeatherMap API Mappings)
# =============================================================================


class OpenWeatherMain(BaseModel):
    temp: float
    feels_like: float
    humidity: float


class OpenWeatherWind(BaseModel):
    speed: float


class OpenWeatherCondition(BaseModel):
    description: str
    icon: str


class OpenWeatherApiResponse(BaseModel):
    """Subset of the OpenWeatherMap current weather response."""

    main: OpenWeatherMain
    wind: OpenWeatherWind
    weather: list[OpenWeatherCondition] = Field(min_length=1)
    name: str | None = None


# =============================================================================
# Domain Models
# =============================================================================


class CurrentConditions(BaseModel):
    """Current conditions from the primary source. Wind speed in km/h."""

    model_config = ConfigDict(frozen=True)

    temperature: int
    feels_like: int
    humidity: int
    wind_speed: int
    weather_code: int


class DailyForecastEntry(BaseModel):
    """One forecast day. Wind speed in km/h, precipitation in mm. None marks a gap."""

    model_config = ConfigDict(frozen=True)

    date: str
    temp_max: int | None
    temp_min: int | None
    weather_code: int | None
    precipitation: float | None
    wind_speed: int | None


class RichWeather(BaseModel):
    """Current conditions plus a daily forecast."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rich"] = "rich"
    current: CurrentConditions
    daily: list[DailyForecastEntry]
    location: str


class SimpleWeather(BaseModel):
    """Current conditions only, described by free text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["simple"] = "simple"
    temperature: int
    feels_like: int
    humidity: int
    wind_speed: int
    description: str
    icon: str
    location: str


WeatherPayload = Annotated[RichWeather | SimpleWeather, Field(discriminator="kind")]
