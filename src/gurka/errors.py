"""Exception hierarchy for gurka.

Every failure the tool can hit during a run maps to one of these classes.
The CLI catches :class:`GurkaError`, prints the message and exits with the
class's ``exit_code``.
"""
from __future__ import annotations
from typing import Optional
import requests


class GurkaError(Exception):
    """Base exception for all gurka errors."""
    exit_code = 1


class ConfigError(GurkaError):
    """Locations file is unreadable, unwritable or malformed."""
    pass


class UnknownLocationError(GurkaError):
    """Requested location name is not present in the locations file."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown location: {name!r}")
        self.name = name


class InvalidCoordinateError(GurkaError):
    """A latitude or longitude argument could not be parsed as a number."""
    exit_code = 2

    def __init__(self, axis: str, value: str) -> None:
        super().__init__(f"Invalid {axis}: could not convert {value!r} to a number")
        self.axis = axis
        self.value = value


class UsageError(GurkaError):
    """Command line has the wrong shape."""
    exit_code = 2


class FetchError(GurkaError):
    """Forecast request failed at the transport level or with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
        self.response = response


class SchemaError(GurkaError):
    """Forecast response body is not the expected weather document."""
    pass


class TimeParseError(GurkaError):
    """A timeseries timestamp is not in YYYY-MM-DDTHH:MM:SSZ form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid timestamp {value!r} in forecast. Expected YYYY-MM-DDTHH:MM:SSZ"
        )
        self.value = value


__all__ = [
    "GurkaError",
    "ConfigError",
    "UnknownLocationError",
    "InvalidCoordinateError",
    "UsageError",
    "FetchError",
    "SchemaError",
    "TimeParseError",
]
