import math
from datetime import date, datetime

from weatherboard.config import Coordinates
from weatherboard.weather.errors import ParseFailure

# =============================================================================
# Constants
# =============================================================================

# Sunday first, matching date.isoweekday() % 7
_DAY_NAMES = ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]

_MS_TO_KMH = 3.6

# Order matters: first keyword found wins
_DESCRIPTION_ICONS = [
    ("clear", "☀️"),
    ("cloud", "☁️"),
    ("rain", "🌧️"),
    ("storm", "⛈️"),
    ("snow", "❄️"),
]

_DEFAULT_DESCRIPTION_ICON = "🌤️"


def round_half_up(value: float) -> int:
    """Round .5 towards +infinity instead of to the nearest even number."""
    return math.floor(value + 0.5)


def ms_to_kmh(speed: float) -> int:
    """Convert a wind speed in m/s to a rounded km/h value."""
    return round_half_up(speed * _MS_TO_KMH)


def format_date(iso_date: str) -> str:
    """Format an ISO date as '<Weekday>, <day>/<month>', e.g. 'Sexta, 15/3'."""
    try:
        parsed = _parse_iso_date(iso_date)
    except (TypeError, ValueError) as e:
        raise ParseFailure(f"Invalid date: {iso_date!r}") from e

    day_name = _DAY_NAMES[parsed.isoweekday() % 7]
    return f"{day_name}, {parsed.day}/{parsed.month}"


def icon_for_description(description: str) -> str:
    """Pick an icon for a free-text description by keyword."""
    lowered = description.lower()
    for keyword, icon in _DESCRIPTION_ICONS:
        if keyword in lowered:
            return icon
    return _DEFAULT_DESCRIPTION_ICON


def format_coordinates(coordinates: Coordinates) -> str:
    return f"{coordinates.latitude:.2f}, {coordinates.longitude:.2f}"


def _parse_iso_date(value: str) -> date:
    if "T" in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)
