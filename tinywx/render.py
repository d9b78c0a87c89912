"""Turn a provider payload into the short strings printed on the weather line."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Callable

from tinywx.schemas import CurrentWeatherResponse


# Nerd Font glyphs for the provider's icon codes.
CLEAR_DAY = ""
CLEAR_NIGHT = ""
FEW_CLOUDS_DAY = ""
FEW_CLOUDS_NIGHT = ""
SCATTERED_CLOUDS = "摒"
BROKEN_CLOUDS = ""
SHOWER_RAIN = ""
RAIN = ""
THUNDERSTORM = ""
SNOW = ""
MIST = ""

UNKNOWN_ICON = "?"

# Clear sky and few clouds keep separate day and night glyphs; every other
# group shares one glyph between its "d" and "n" codes.
ICONS = {
    "01d": CLEAR_DAY,
    "01n": CLEAR_NIGHT,
    "02d": FEW_CLOUDS_DAY,
    "02n": FEW_CLOUDS_NIGHT,
    "03d": SCATTERED_CLOUDS,
    "03n": SCATTERED_CLOUDS,
    "04d": BROKEN_CLOUDS,
    "04n": BROKEN_CLOUDS,
    "09d": SHOWER_RAIN,
    "09n": SHOWER_RAIN,
    "10d": RAIN,
    "10n": RAIN,
    "11d": THUNDERSTORM,
    "11n": THUNDERSTORM,
    "13d": SNOW,
    "13n": SNOW,
    "50d": MIST,
    "50n": MIST,
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def icon_for(code: str) -> str:
    return ICONS.get(code, UNKNOWN_ICON)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (15.5 -> 16, -0.5 -> -1)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def wall_clock(epoch_seconds: int) -> str:
    return (_EPOCH + timedelta(seconds=epoch_seconds)).strftime("%H:%M:%S")


def _degrees(value: float) -> str:
    return f"{round_half_away(value)}°"


_RENDERERS: dict[str, Callable[[CurrentWeatherResponse], str]] = {
    "icon": lambda r: icon_for(r.weather[0].icon),
    "temp": lambda r: _degrees(r.main.temp),
    "feels_like": lambda r: _degrees(r.main.feels_like),
    "humidity": lambda r: f"{r.main.humidity}%",
    "description": lambda r: r.weather[0].description,
    "time": lambda r: wall_clock(r.dt + r.timezone),
}

FIELDS = tuple(_RENDERERS)


def render(response: CurrentWeatherResponse, field: str) -> str:
    renderer = _RENDERERS.get(field)
    if renderer is None:
        return f"('{field}?')"
    return renderer(response)


def render_line(response: CurrentWeatherResponse, fields: list[str]) -> str:
    return " ".join(render(response, field) for field in fields)
