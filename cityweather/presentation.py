# ABOUTME: Pure display mappings for weather state: condition glyphs, clock strings, card text.
# ABOUTME: Every function here is total and returns a displayable value for any input.

import math
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel

from cityweather.models import WeatherEnvelope

POPULAR_CITIES = [
    "London",
    "New York",
    "Tokyo",
    "Paris",
    "Sydney",
    "Accra",
    "Kumasi",
    "Kigali",
    "Lagos",
    "Nairobi",
    "Cairo",
    "Berlin",
    "Moscow",
    "Cape Town",
    "Toronto",
]

DEFAULT_GLYPH = "🌤️"
FAILURE_GLYPH = "😔"
CONDITION_GLYPHS = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "🌧️",
    "snow": "❄️",
    "thunderstorm": "⛈️",
    "drizzle": "🌦️",
    "mist": "🌫️",
    "fog": "🌫️",
}

FAILURE_TITLE = "Weather Data Not Available"
DEFAULT_FAILURE_MESSAGE = "Unable to fetch weather data for this city"
INVALID_TIME = "--:--"


def condition_to_glyph(main_condition: str) -> str:
    """Map a provider main condition (e.g. "Rain") to its glyph, case-insensitively."""
    return CONDITION_GLYPHS.get((main_condition or "").lower(), DEFAULT_GLYPH)


def format_clock_time(epoch_seconds: float, tz: str | tzinfo = "UTC") -> str:
    """Format epoch seconds as a 12-hour "hh:MM AM" clock string in ``tz``.

    Timestamps the platform cannot represent, NaN, and unknown zone names all
    produce "--:--".
    """
    try:
        zone = ZoneInfo(tz) if isinstance(tz, str) else tz
        moment = datetime.fromtimestamp(epoch_seconds, tz=zone or timezone.utc)
    except (OverflowError, OSError, ValueError, ZoneInfoNotFoundError):
        return INVALID_TIME
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.hour % 12 or 12:02d}:{moment.minute:02d} {suffix}"


def failure_message(envelope: WeatherEnvelope) -> str:
    """Text for the failure card: the provider's message, or a generic fallback."""
    return envelope.message or DEFAULT_FAILURE_MESSAGE


def round_half_up(value: float) -> str:
    """Round to the nearest integer, halves upward. Non-finite values render as "--"."""
    if not math.isfinite(value):
        return "--"
    return str(math.floor(value + 0.5))


def _plain(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _kilometres(meters: float) -> str:
    return f"{meters / 1000:.1f} km" if math.isfinite(meters) else "-- km"


class WeatherView(BaseModel):
    """Display strings for the success card."""

    heading: str
    glyph: str
    temperature: str
    feels_like: str
    description: str
    humidity: str
    wind_speed: str
    pressure: str
    visibility: str
    sunrise: str
    sunset: str


def build_weather_view(envelope: WeatherEnvelope, tz: str | tzinfo = "UTC") -> WeatherView | None:
    """Render a success envelope into card text. Failure envelopes have no view."""
    if not envelope.success or envelope.data is None:
        return None

    data = envelope.data
    return WeatherView(
        heading=f"{envelope.city}, {data.country}",
        glyph=condition_to_glyph(data.main_condition),
        temperature=f"{round_half_up(data.temperature)}°C",
        feels_like=f"Feels like {round_half_up(data.feels_like)}°C",
        description=data.description,
        humidity=f"{_plain(data.humidity)}%",
        wind_speed=f"{round_half_up(data.wind_speed)} m/s",
        pressure=f"{_plain(data.pressure)} hPa",
        visibility=_kilometres(data.visibility_meters),
        sunrise=format_clock_time(data.sunrise, tz),
        sunset=format_clock_time(data.sunset, tz),
    )
