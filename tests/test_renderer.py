import pytest

from weatherboard.view import ForecastCard, MemoryViewSurface, Slot, WeatherRenderer
from weatherboard.view.renderer import build_forecast_card
from weatherboard.view.surface import TEXT_SLOTS
from weatherboard.weather.errors import ParseFailure
from weatherboard.weather.views import (
    CurrentConditions,
    DailyForecastEntry,
    RichWeather,
    SimpleWeather,
)


def _day(date, code=0, precipitation=0.0, temp_max=20, temp_min=10):
    return DailyForecastEntry(
        date=date,
        temp_max=temp_max,
        temp_min=temp_min,
        weather_code=code,
        precipitation=precipitation,
        wind_speed=12,
    )


def _rich(days=None):
    return RichWeather(
        current=CurrentConditions(
            temperature=18, feels_like=16, humidity=62, wind_speed=36, weather_code=3
        ),
        daily=days
        if days is not None
        else [
            _day("2024-03-15", code=0),
            _day("2024-03-16", code=3),
            _day("2024-03-17", code=61, precipitation=2.4),
            _day("2024-03-18", code=95, precipitation=12.0),
            _day("2024-03-19", code=999),
        ],
        location="Marvão, Portalegre",
    )


def _simple(description="light rain"):
    return SimpleWeather(
        temperature=19,
        feels_like=17,
        humidity=55,
        wind_speed=14,
        description=description,
        icon="10d",
        location="Marvão",
    )


def _assert_only_visible(surface, slot):
    for container in (Slot.LOADING, Slot.CONTENT, Slot.ERROR):
        assert surface.is_visible(container) is (container == slot)


def test_render_rich_populates_current_fields():
    surface = MemoryViewSurface()

    WeatherRenderer(surface).render(_rich())

    _assert_only_visible(surface, Slot.CONTENT)
    assert surface.text(Slot.TEMPERATURE) == "18"
    assert surface.text(Slot.FEELS_LIKE) == "16"
    assert surface.text(Slot.HUMIDITY) == "62"
    assert surface.text(Slot.WIND_SPEED) == "36"
    assert surface.text(Slot.LOCATION) == "Marvão, Portalegre"
    assert surface.text(Slot.ICON) == "☁️"
    assert surface.text(Slot.DESCRIPTION) == "Nublado"


def test_render_rich_builds_forecast_in_order():
    surface = MemoryViewSurface()

    WeatherRenderer(surface).render(_rich())

    cards = surface.forecast()
    assert len(cards) == 5
    assert [card.date_label for card in cards] == [
        "Sexta, 15/3",
        "Sábado, 16/3",
        "Domingo, 17/3",
        "Segunda, 18/3",
        "Terça, 19/3",
    ]
    assert cards[0].icon == "☀️"
    assert cards[0].temp_max == "20°"
    assert cards[0].temp_min == "10°"
    assert cards[4].description == "Condições desconhecidas"


def test_forecast_precipitation_only_when_positive():
    assert build_forecast_card(_day("2024-03-15", precipitation=0)).precipitation is None
    card = build_forecast_card(_day("2024-03-15", precipitation=2.4))
    assert card.precipitation == "💧 2.4mm"
    assert build_forecast_card(_day("2024-03-15", precipitation=3.0)).precipitation == "💧 3mm"


def test_render_rich_replaces_previous_forecast():
    surface = MemoryViewSurface()
    renderer = WeatherRenderer(surface)

    renderer.render(_rich())
    renderer.render(_rich(days=[_day("2024-04-01"), _day("2024-04-02")]))

    assert [card.date_label for card in surface.forecast()] == [
        "Segunda, 1/4",
        "Terça, 2/4",
    ]


@pytest.mark.parametrize(
    "description, icon",
    [
        ("clear sky", "☀️"),
        ("Broken Clouds", "☁️"),
        ("light rain", "🌧️"),
        ("thunderstorm", "⛈️"),
        ("snow", "❄️"),
        ("mist", "🌤️"),
    ],
)
def test_render_simple_uses_description(description, icon):
    surface = MemoryViewSurface()

    WeatherRenderer(surface).render(_simple(description))

    _assert_only_visible(surface, Slot.CONTENT)
    assert surface.text(Slot.TEMPERATURE) == "19"
    assert surface.text(Slot.FEELS_LIKE) == "17"
    assert surface.text(Slot.HUMIDITY) == "55"
    assert surface.text(Slot.WIND_SPEED) == "14"
    assert surface.text(Slot.LOCATION) == "Marvão"
    assert surface.text(Slot.DESCRIPTION) == description
    assert surface.text(Slot.ICON) == icon


def test_render_simple_drops_stale_forecast():
    surface = MemoryViewSurface()
    renderer = WeatherRenderer(surface)

    renderer.render(_rich())
    renderer.render(_simple())

    assert surface.forecast() == []


def test_missing_slots_are_skipped():
    surface = MemoryViewSurface(slots=[Slot.TEMPERATURE, Slot.CONTENT])
    renderer = WeatherRenderer(surface)

    renderer.render(_rich())
    renderer.render(_simple())
    renderer.show_error()
    renderer.show_loading()

    assert surface.slots == {Slot.TEMPERATURE, Slot.CONTENT}
    assert surface.is_visible(Slot.CONTENT) is False


def test_empty_surface_tolerated():
    surface = MemoryViewSurface(slots=[])

    WeatherRenderer(surface).render(_rich())

    assert surface.texts == {}


def test_show_error_clears_content():
    surface = MemoryViewSurface()
    renderer = WeatherRenderer(surface)
    renderer.render(_rich())

    renderer.show_error()

    _assert_only_visible(surface, Slot.ERROR)
    assert all(surface.text(slot) is None for slot in TEXT_SLOTS)
    assert surface.forecast() == []


def test_show_loading():
    surface = MemoryViewSurface()

    WeatherRenderer(surface).show_loading()

    _assert_only_visible(surface, Slot.LOADING)


def test_bad_forecast_date_leaves_view_untouched():
    surface = MemoryViewSurface()
    renderer = WeatherRenderer(surface)
    renderer.show_loading()

    with pytest.raises(ParseFailure):
        renderer.render(_rich(days=[_day("garbage")]))

    _assert_only_visible(surface, Slot.LOADING)
    assert surface.texts == {}


def test_memory_surface_rejects_unknown_slot():
    surface = MemoryViewSurface(slots=[Slot.TEMPERATURE])

    with pytest.raises(KeyError):
        surface.set_text(Slot.HUMIDITY, "50")

    with pytest.raises(KeyError):
        surface.append(
            Slot.FORECAST,
            ForecastCard(
                date_label="x", icon="x", description="x", temp_max="1°", temp_min="0°"
            ),
        )


def test_forecast_card_with_missing_values():
    day = DailyForecastEntry(
        date="2024-03-16",
        temp_max=None,
        temp_min=11,
        weather_code=None,
        precipitation=None,
        wind_speed=None,
    )

    card = build_forecast_card(day)

    assert card.date_label == "Sábado, 16/3"
    assert card.precipitation is None
    assert card.temp_max == "-°"
    assert card.temp_min == "11°"
    assert card.icon == "☀️"
    assert card.description == "Condições desconhecidas"
