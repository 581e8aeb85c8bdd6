"""Tests for the TOML location store."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from gurka.errors import ConfigError, UnknownLocationError
from gurka.locations import Location, LocationStore, create_default


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestCreateDefault:
    def test_round_trip_yields_seeded_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "locations.toml"
        create_default(path)

        locations = LocationStore(path).load()

        assert list(locations) == ["Göteborg", "Halmstad"]
        assert locations["Göteborg"] == Location(name="Göteborg", latitude=57.960308, longitude=12.126554)
        assert locations["Halmstad"] == Location(name="Halmstad", latitude=56.676086, longitude=12.858977)

    def test_written_as_inline_tables(self, tmp_path: Path) -> None:
        path = tmp_path / "locations.toml"
        create_default(path)

        text = path.read_text(encoding="utf-8")
        assert '"Göteborg" = { latitude = 57.960308, longitude = 12.126554 }' in text
        assert '"Halmstad" = { latitude = 56.676086, longitude = 12.858977 }' in text

    def test_unwritable_location_raises_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Could not create"):
            create_default(tmp_path / "missing-dir" / "locations.toml")


class TestLoad:
    def test_creates_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "locations.toml"
        assert not path.exists()

        locations = LocationStore(path).load()

        assert path.exists()
        assert len(locations) == 2

    def test_does_not_overwrite_existing_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Oslo" = { latitude = 59.91, longitude = 10.75 }\n')

        locations = LocationStore(path).load()

        assert list(locations) == ["Oslo"]

    def test_preserves_file_order(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "locations.toml",
            '"b" = { latitude = 1.0, longitude = 2.0 }\n'
            '"a" = { latitude = 3.0, longitude = 4.0 }\n'
            '"c" = { latitude = 5.0, longitude = 6.0 }\n',
        )
        assert LocationStore(path).names() == ["b", "a", "c"]

    def test_integer_coordinates_accepted(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Equator" = { latitude = 0, longitude = 30 }\n')

        location = LocationStore(path).resolve("Equator")

        assert location.latitude == 0.0
        assert location.longitude == 30.0

    def test_malformed_toml_raises_config_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Oslo" = { latitude = 59.91, longitude =\n')

        with pytest.raises(ConfigError, match="Malformed locations file"):
            LocationStore(path).load()

    def test_missing_longitude_raises_config_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Oslo" = { latitude = 59.91 }\n')

        with pytest.raises(ConfigError, match="'Oslo' needs numeric longitude"):
            LocationStore(path).load()

    def test_string_coordinate_raises_config_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Oslo" = { latitude = "59.91", longitude = 10.75 }\n')

        with pytest.raises(ConfigError, match="latitude"):
            LocationStore(path).load()

    def test_non_table_entry_raises_config_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", 'Oslo = 59.91\n')

        with pytest.raises(ConfigError, match="must be a table"):
            LocationStore(path).load()

    def test_directory_path_raises_config_error(self, tmp_path: Path) -> None:
        path = tmp_path / "locations.toml"
        path.mkdir()

        with pytest.raises(ConfigError, match="Could not read"):
            LocationStore(path).load()

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="file permissions are not enforced for root",
    )
    def test_unreadable_file_raises_config_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "locations.toml", '"Oslo" = { latitude = 59.91, longitude = 10.75 }\n')
        path.chmod(0o000)
        try:
            with pytest.raises(ConfigError, match="Could not read"):
                LocationStore(path).load()
        finally:
            path.chmod(0o644)


class TestResolve:
    def test_returns_stored_coordinates(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "locations.toml",
            '"Oslo" = { latitude = 59.91, longitude = 10.75 }\n'
            '"Tromsø" = { latitude = 69.6492, longitude = 18.9553 }\n',
        )
        store = LocationStore(path)

        assert store.resolve("Tromsø").latitude == 69.6492
        assert store.resolve("Tromsø").longitude == 18.9553
        assert store.resolve("Oslo").latitude == 59.91

    def test_unknown_name_raises(self, tmp_path: Path) -> None:
        store = LocationStore(tmp_path / "locations.toml")

        with pytest.raises(UnknownLocationError) as exc_info:
            store.resolve("Atlantis")

        assert exc_info.value.name == "Atlantis"
        assert "Atlantis" in str(exc_info.value)

    def test_lookup_is_case_sensitive(self, tmp_path: Path) -> None:
        store = LocationStore(tmp_path / "locations.toml")

        with pytest.raises(UnknownLocationError):
            store.resolve("halmstad")


class TestLocation:
    def test_is_immutable(self) -> None:
        location = Location(name="Oslo", latitude=59.91, longitude=10.75)
        with pytest.raises(ValidationError):
            location.latitude = 0.0  # type: ignore[misc]
