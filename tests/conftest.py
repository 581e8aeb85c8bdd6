"""Shared pytest fixtures for gurka tests."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

from gurka.config import reset_settings
from gurka.utils.logging_config import ColoredFormatter

SAMPLE_FORECAST: Dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [12.8590, 56.6761, 12]},
    "properties": {
        "meta": {
            "updated_at": "2024-01-15T09:41:12Z",
            "units": {
                "air_pressure_at_sea_level": "hPa",
                "air_temperature": "celsius",
                "cloud_area_fraction": "%",
                "precipitation_amount": "mm",
                "relative_humidity": "%",
                "wind_from_direction": "degrees",
                "wind_speed": "m/s",
            },
        },
        "timeseries": [
            {
                "time": "2024-01-15T10:00:00Z",
                "data": {
                    "instant": {
                        "details": {
                            "air_pressure_at_sea_level": 1012.3,
                            "air_temperature": -2.5,
                            "cloud_area_fraction": 87.5,
                            "relative_humidity": 91.2,
                            "wind_from_direction": 215.4,
                            "wind_speed": 4.3,
                            "wind_speed_of_gust": 9.1,
                            "ultraviolet_index_clear_sky": 0.4,
                        }
                    },
                    "next_1_hours": {
                        "summary": {"symbol_code": "cloudy"},
                        "details": {"precipitation_amount": 0.0},
                    },
                    "next_6_hours": {
                        "summary": {"symbol_code": "lightsnow"},
                        "details": {"air_temperature_max": -1.0},
                    },
                    "next_12_hours": {"summary": {"symbol_code": "snow"}},
                },
            },
            {
                "time": "2024-01-15T11:00:00Z",
                "data": {
                    "instant": {"details": {"air_temperature": -1.9}},
                },
            },
        ],
    },
}

GURKA_ENV_VARS = [
    "GURKA_LOCATIONS_FILE",
    "GURKA_API_URL",
    "GURKA_USER_AGENT",
    "GURKA_REQUEST_TIMEOUT",
    "GURKA_LOG_LEVEL",
]


@pytest.fixture
def forecast_payload() -> Dict[str, Any]:
    """Decoded Locationforecast body with one full and one sparse entry."""
    return copy.deepcopy(SAMPLE_FORECAST)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all gurka env vars for isolated testing."""
    for var in GURKA_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def isolated_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> Generator[Path, None, None]:
    """Run every test from an empty directory with fresh settings.

    Keeps a developer's locations.toml or .env out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield tmp_path
    reset_settings()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Undo configure_logging() calls made by the code under test."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, ColoredFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
