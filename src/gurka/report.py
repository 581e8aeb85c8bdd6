"""Render a forecast as a tab-separated table in local time."""
from __future__ import annotations
import datetime as dt
import sys
from typing import Optional, TextIO
from gurka.clients.metno.models import TimeseriesEntry, WeatherResponse
from gurka.errors import TimeParseError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING_READING = 0.0

HEADER = "Time\t\t\tTemperature\tHumidity\tWind speed\tWind direction\tUltraviolet index"

def parse_timestamp(value: str) -> dt.datetime:
    """Parse an API timestamp into an aware UTC datetime.

    Raises:
        TimeParseError: If the value is not exactly YYYY-MM-DDTHH:MM:SSZ.
    """
    try:
        parsed = dt.datetime.strptime(value, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as exc:
        raise TimeParseError(value) from exc
    return parsed.replace(tzinfo=dt.timezone.utc)

def to_local(value: str, tz: Optional[dt.tzinfo] = None) -> dt.datetime:
    """Convert an API timestamp to ``tz``, or the process's local zone when None."""
    return parse_timestamp(value).astimezone(tz)

def format_reading(value: Optional[float]) -> str:
    """Format a reading for display; a missing reading shows as 0.0."""
    return str(MISSING_READING if value is None else value)

def format_row(entry: TimeseriesEntry, tz: Optional[dt.tzinfo] = None) -> str:
    """Tab-separated table row for one entry; missing readings show as 0.0."""
    details = entry.details
    readings = (
        details.air_temperature,
        details.relative_humidity,
        details.wind_speed,
        details.wind_from_direction,
        details.ultraviolet_index_clear_sky,
    )
    local_time = to_local(entry.time, tz).strftime(DISPLAY_FORMAT)
    return local_time + "\t" + "\t\t".join(format_reading(value) for value in readings)

def render(
    response: WeatherResponse,
    stream: Optional[TextIO] = None,
    tz: Optional[dt.tzinfo] = None,
) -> None:
    """Write the header and one row per timeseries entry, in API order.

    Args:
        response: Parsed forecast document.
        stream: Output stream (default: sys.stdout).
        tz: Display timezone (default: the process's local timezone).

    Raises:
        TimeParseError: If any entry carries a malformed timestamp.
    """
    # A bad timestamp aborts before anything is written
    rows = [format_row(entry, tz) for entry in response.timeseries]
    out = stream if stream is not None else sys.stdout
    out.write(HEADER + "\n")
    for row in rows:
        out.write(row + "\n")

__all__ = [
    "HEADER",
    "format_reading",
    "format_row",
    "parse_timestamp",
    "render",
    "to_local",
]
