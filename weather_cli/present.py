from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from typing import Dict, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import DecodeError
from .models import CurrentConditions, Forecast, Location

DEFAULT_GLYPH = "⭐️"

GLYPHS: Dict[str, str] = {
    "clear-day": "☀️",
    "clear-night": "🌚",
    "rain": "☔️",
    "snow": "❄️",
    "sleet": "🌨",
    "wind": "🌬",
    "fog": "🌫",
    "cloudy": "☁️",
    "partly-cloudy-day": "⛅️",
    "partly-cloudy-night": "🌚",
}

# Labels only; values are printed in whatever system the service answered in.
UNIT_LABELS: Dict[str, Dict[str, str]] = {
    "us": {"speed": "mph", "distance": "mi", "pressure": "mb"},
    "si": {"speed": "m/s", "distance": "km", "pressure": "hPa"},
    "ca": {"speed": "km/h", "distance": "km", "pressure": "hPa"},
    "uk2": {"speed": "mph", "distance": "mi", "pressure": "hPa"},
}

RULE = "-" * 32


def parse_icon(code: str) -> str:
    """Map a condition code to its glyph; unknown codes get the default star."""
    return GLYPHS.get(code, DEFAULT_GLYPH)


def _native(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_details(current: CurrentConditions, units: str = "us") -> str:
    """Build the wind/humidity/dew point/UV/visibility/pressure line.

    Wind, humidity, dew point and pressure go through the built-in round(),
    which breaks ties to the even integer.
    """
    labels = UNIT_LABELS.get(units, UNIT_LABELS["us"])
    return (
        f"Wind: {round(current.wind_speed)} {labels['speed']}   "
        f"Humidity: {round(current.humidity * 100)}%   "
        f"Dew Pt: {round(current.dew_point)}°   "
        f"UV Index: {_native(current.uv_index)}   "
        f"Visibility: {_native(current.visibility)}+ {labels['distance']}   "
        f"Pressure: {round(current.pressure)} {labels['pressure']}"
    )


def format_timestamp(unix_time: int, timezone: str) -> str:
    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise DecodeError(f"Error with timezone conversion: {timezone!r}") from e

    local = datetime.fromtimestamp(unix_time, tz=dt_timezone.utc).astimezone(zone)
    return f"{local:%A} {local:%B} {local.day} {local.hour}:{local.minute}"


def render_report(location: Location, forecast: Forecast, outlook: bool = False) -> str:
    current = forecast.currently
    updated = format_timestamp(current.time, forecast.timezone)

    lines: List[str] = [
        f"Current conditions for {location.address} (last updated on {updated})",
        RULE,
        f"{_native(current.temperature)}°   {current.summary} {parse_icon(current.icon)}",
        format_details(current, forecast.units),
    ]
    if outlook:
        for label, block in (
            ("Next hour", forecast.minutely),
            ("Next 48 hours", forecast.hourly),
            ("This week", forecast.daily),
        ):
            if block is not None and block.summary:
                lines.append(f"{label}: {block.summary} {parse_icon(block.icon)}")
    lines.append(RULE)
    return "\n".join(lines)
