#!/usr/bin/env python3
"""Command line entry point.

    gurka                 list location names from the locations file
    gurka <name>          forecast for a named location
    gurka <lat> <lng>     forecast for explicit coordinates
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, NamedTuple, Optional, Sequence
from pydantic import ValidationError
from gurka.clients.metno import fetch_weather
from gurka.config import Settings, get_settings
from gurka.errors import GurkaError, InvalidCoordinateError, UsageError
from gurka.locations import LocationStore
from gurka.report import render
from gurka.utils.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)


class Target(NamedTuple):
    """Coordinates to forecast plus a label for log messages."""
    latitude: float
    longitude: float
    label: str


def parse_coordinate(axis: str, value: str) -> float:
    """Parse a latitude or longitude argument.

    Raises:
        InvalidCoordinateError: If the value is not a number.
    """
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidCoordinateError(axis, value) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the gurka CLI."""
    parser = argparse.ArgumentParser(
        prog="gurka",
        description="Print the MET Norway forecast for a named location or a coordinate pair.",
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="NAME | LAT LNG",
        help="Location name from the locations file, or latitude and longitude",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    return parser


def resolve_target(targets: Sequence[str], store: LocationStore) -> Target:
    """Turn one or two positional arguments into coordinates.

    Raises:
        UsageError: If there are no arguments or more than two.
        InvalidCoordinateError: If a coordinate cannot be parsed.
        UnknownLocationError: If a single name is not in the store.
    """
    if len(targets) > 2:
        raise UsageError("Too many arguments")
    if len(targets) == 2:
        lat = parse_coordinate("latitude", targets[0])
        lng = parse_coordinate("longitude", targets[1])
        return Target(lat, lng, f"{lat}, {lng}")
    if len(targets) == 1:
        location = store.resolve(targets[0])
        return Target(
            location.latitude,
            location.longitude,
            f"{location.name} (latitude: {location.latitude}, longitude: {location.longitude})",
        )
    raise UsageError("Expected a location name or a latitude and longitude")


def _list_locations(store: LocationStore) -> None:
    for name in store.names():
        print(name)


def _forecast(target: Target, settings: Settings) -> None:
    LOGGER.info("Fetching weather data for %s", target.label)
    weather = fetch_weather(
        target.latitude,
        target.longitude,
        url=settings.api_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout,
    )
    render(weather)


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    configure_logging(logging.DEBUG if args.verbose else getattr(logging, settings.log_level))
    store = LocationStore(settings.locations_file)

    try:
        if not args.targets:
            _list_locations(store)
            return 0
        _forecast(resolve_target(args.targets, store), settings)
        return 0
    except (UsageError, InvalidCoordinateError) as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    except GurkaError as exc:
        LOGGER.debug("Run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()
