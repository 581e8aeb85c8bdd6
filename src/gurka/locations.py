"""Named locations stored in a local TOML file.

The file maps a quoted label to an inline table of coordinates::

    "Göteborg" = { latitude = 57.960308, longitude = 12.126554 }

A missing file is created with two sample entries on first use.
"""
from __future__ import annotations
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, ValidationError
from gurka.errors import ConfigError, UnknownLocationError

LOGGER = logging.getLogger(__name__)

DEFAULT_LOCATIONS_FILE = Path("locations.toml")

DEFAULT_LOCATIONS = (
    ("Göteborg", 57.960308, 12.126554),
    ("Halmstad", 56.676086, 12.858977),
)

class Location(BaseModel):
    """A named coordinate pair.

    Attributes:
        name: Label used on the command line; unique within a file.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    latitude: float
    longitude: float

def _format_entry(name: str, latitude: float, longitude: float) -> str:
    return f'"{name}" = {{ latitude = {latitude!r}, longitude = {longitude!r} }}\n'

def create_default(path: Union[str, Path]) -> None:
    """Write the sample locations file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path = Path(path)
    content = "".join(_format_entry(*entry) for entry in DEFAULT_LOCATIONS)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not create locations file {path}: {exc}") from exc
    LOGGER.info("Created locations config file %s", path)

def _parse_entry(name: str, value: Any) -> Location:
    if not isinstance(value, dict):
        raise ConfigError(
            f"Location {name!r} must be a table with latitude and longitude"
        )
    try:
        return Location(
            name=name,
            latitude=value.get("latitude"),
            longitude=value.get("longitude"),
        )
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise ConfigError(
            f"Location {name!r} needs numeric {' and '.join(fields)}"
        ) from exc

class LocationStore:
    """Load and look up named locations from a TOML file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_LOCATIONS_FILE) -> None:
        self.path = Path(path)
        self._created = False
        self._locations: Optional[Dict[str, Location]] = None

    def load(self) -> Dict[str, Location]:
        """Read the file, creating it first if it does not exist.

        Returns:
            Mapping of name to Location in file order.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML, or
                an entry lacks numeric coordinates.
        """
        if not self.path.exists() and not self._created:
            create_default(self.path)
            self._created = True

        try:
            with self.path.open("rb") as handle:
                document = tomllib.load(handle)
        except OSError as exc:
            raise ConfigError(f"Could not read locations file {self.path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Malformed locations file {self.path}: {exc}") from exc

        locations = {name: _parse_entry(name, value) for name, value in document.items()}
        LOGGER.debug("Loaded %d locations from %s", len(locations), self.path)
        self._locations = locations
        return locations

    @property
    def locations(self) -> Dict[str, Location]:
        if self._locations is None:
            return self.load()
        return self._locations

    def names(self) -> List[str]:
        return list(self.locations)

    def resolve(self, name: str) -> Location:
        """Look up a location by name.

        Raises:
            UnknownLocationError: If no entry has that name.
        """
        try:
            return self.locations[name]
        except KeyError:
            raise UnknownLocationError(name) from None

__all__ = [
    "DEFAULT_LOCATIONS",
    "DEFAULT_LOCATIONS_FILE",
    "Location",
    "LocationStore",
    "create_default",
]
