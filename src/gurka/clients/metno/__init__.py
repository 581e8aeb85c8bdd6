from __future__ import annotations
from .client import (
    build_params,
    fetch_weather,
    parse_weather_response,
)
from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    FORECAST_ENDPOINT,
)
from .models import (
    Geometry,
    Meta,
    PeriodForecast,
    TimeseriesEntry,
    Units,
    WeatherDetails,
    WeatherResponse,
)

__all__ = [
    # Client functions
    "fetch_weather",
    "parse_weather_response",
    "build_params",
    # Models
    "WeatherResponse",
    "Geometry",
    "Meta",
    "Units",
    "TimeseriesEntry",
    "PeriodForecast",
    "WeatherDetails",
    # Constants
    "FORECAST_ENDPOINT",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT_SECONDS",
]
