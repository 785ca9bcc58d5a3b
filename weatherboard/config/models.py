from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weatherboard.config.env import WeatherEnv


class Coordinates(BaseModel):
    """A fixed latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


# Marvão, Portalegre
DEFAULT_COORDINATES = Coordinates(latitude=39.3939, longitude=-7.3767)
DEFAULT_LOCATION_LABEL = "Marvão, Portalegre"


class WeatherSettings(BaseModel):
    """Settings for one deployment. Built once at startup, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates = DEFAULT_COORDINATES
    location_label: str = DEFAULT_LOCATION_LABEL
    timezone: str = "Europe/Lisbon"
    forecast_days: int = Field(default=5, ge=1, le=16)
    refresh_interval_seconds: float = Field(default=30 * 60, gt=0)
    openweather_api_key: str | None = None

    @field_validator("openweather_api_key", mode="before")
    @classmethod
    def _blank_key_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("API key must be a string")

        value = value.strip()
        return value or None

    @property
    def has_fallback_credential(self) -> bool:
        return self.openweather_api_key is not None

    @classmethod
    def from_env(cls, env: WeatherEnv | None = None, **overrides) -> WeatherSettings:
        env = env or WeatherEnv()
        values = {"openweather_api_key": env.openweather_api_key}
        values.update(overrides)
        return cls.model_validate(values)
