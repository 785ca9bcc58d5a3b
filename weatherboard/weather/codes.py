from typing import NamedTuple


class WeatherInfo(NamedTuple):
    icon: str
    description: str


# =============================================================================
# WMO weather codes
# =============================================================================

_WEATHER_CODES: dict[int, WeatherInfo] = {
    # Clear conditions
    0: WeatherInfo("☀️", "Céu limpo"),
    1: WeatherInfo("🌤️", "Principalmente claro"),
    2: WeatherInfo("⛅", "Parcialmente nublado"),
    3: WeatherInfo("☁️", "Nublado"),
    # Fog conditions
    45: WeatherInfo("🌫️", "Nevoeiro"),
    48: WeatherInfo("🌫️", "Nevoeiro com geada"),
    # Drizzle conditions
    51: WeatherInfo("🌦️", "Chuva leve"),
    53: WeatherInfo("🌦️", "Chuva moderada"),
    55: WeatherInfo("🌧️", "Chuva forte"),
    56: WeatherInfo("🌨️", "Chuva congelante leve"),
    57: WeatherInfo("🌨️", "Chuva congelante forte"),
    # Rain conditions
    61: WeatherInfo("🌦️", "Chuva leve"),
    63: WeatherInfo("🌧️", "Chuva moderada"),
    65: WeatherInfo("🌧️", "Chuva forte"),
    66: WeatherInfo("🌨️", "Chuva congelante leve"),
    67: WeatherInfo("🌨️", "Chuva congelante forte"),
    # Snow conditions
    71: WeatherInfo("❄️", "Queda de neve leve"),
    73: WeatherInfo("❄️", "Queda de neve moderada"),
    75: WeatherInfo("❄️", "Queda de neve forte"),
    77: WeatherInfo("❄️", "Grãos de neve"),
    # Shower conditions
    80: WeatherInfo("🌦️", "Pancadas de chuva leves"),
    81: WeatherInfo("🌧️", "Pancadas de chuva moderadas"),
    82: WeatherInfo("🌧️", "Pancadas de chuva fortes"),
    85: WeatherInfo("❄️", "Pancadas de neve leves"),
    86: WeatherInfo("❄️", "Pancadas de neve fortes"),
    # Thunderstorm conditions
    95: WeatherInfo("⛈️", "Tempestade"),
    96: WeatherInfo("⛈️", "Tempestade com granizo"),
    99: WeatherInfo("⛈️", "Tempestade forte com granizo"),
}

UNKNOWN_WEATHER = WeatherInfo("☀️", "Condições desconhecidas")


def get_weather_info(code: int | None) -> WeatherInfo:
    """Get icon and description for a weather code; unknown codes never raise."""
    return _WEATHER_CODES.get(code, UNKNOWN_WEATHER)
