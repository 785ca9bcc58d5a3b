import pytest

from weatherboard.weather.codes import UNKNOWN_WEATHER, get_weather_info


@pytest.mark.parametrize(
    "code, icon, description",
    [
        (0, "☀️", "Céu limpo"),
        (2, "⛅", "Parcialmente nublado"),
        (45, "🌫️", "Nevoeiro"),
        (55, "🌧️", "Chuva forte"),
        (66, "🌨️", "Chuva congelante leve"),
        (77, "❄️", "Grãos de neve"),
        (81, "🌧️", "Pancadas de chuva moderadas"),
        (86, "❄️", "Pancadas de neve fortes"),
        (95, "⛈️", "Tempestade"),
        (99, "⛈️", "Tempestade forte com granizo"),
    ],
)
def test_known_codes(code, icon, description):
    info = get_weather_info(code)
    assert info.icon == icon
    assert info.description == description


@pytest.mark.parametrize("code", [999, -1, 4, 50, None])
def test_unknown_code_returns_default(code):
    info = get_weather_info(code)
    assert info == UNKNOWN_WEATHER
    assert info.icon == "☀️"
    assert info.description == "Condições desconhecidas"


@pytest.mark.parametrize(
    "code",
    [
        0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
        71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
    ],
)
def test_table_covers_wmo_codes(code):
    assert get_weather_info(code) != UNKNOWN_WEATHER
