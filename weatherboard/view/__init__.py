from .html_page import HtmlPageSurface
from .renderer import WeatherRenderer, build_forecast_card
from .surface import ForecastCard, MemoryViewSurface, Slot, ViewSurface

__all__ = [
    "ForecastCard",
    "HtmlPageSurface",
    "MemoryViewSurface",
    "Slot",
    "ViewSurface",
    "WeatherRenderer",
    "build_forecast_card",
]
