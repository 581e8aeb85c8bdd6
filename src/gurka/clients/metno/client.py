from __future__ import annotations
import logging
from typing import Any, Dict, Optional
import requests
from pydantic import ValidationError
from gurka.errors import FetchError, SchemaError
from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    FORECAST_ENDPOINT,
)
from .models import WeatherResponse

LOGGER = logging.getLogger(__name__)

def _augment_http_error(exc: requests.HTTPError) -> FetchError:
    """Convert requests.HTTPError to FetchError with additional details."""
    response = exc.response
    status_code = response.status_code if response is not None else None
    detail: Optional[str] = None

    if response is not None:
        try:
            body = response.json()
            if isinstance(body, dict):
                detail = body.get("reason") or body.get("error")
        except (ValueError, requests.JSONDecodeError):
            detail = response.text or None

    message = f"{exc}"
    if detail:
        message = f"{message} (details: {detail})"

    return FetchError(message, status_code=status_code, detail=detail, response=response)

def build_params(lat: float, lng: float) -> Dict[str, str]:
    """Query parameters for a forecast request.

    Coordinates use Python's default float formatting and are never rounded.
    """
    return {"lat": str(lat), "lon": str(lng)}

def _request_json(
    url: str,
    params: Dict[str, str],
    *,
    user_agent: str,
    timeout: Optional[float],
) -> Any:
    """
    Make a single HTTP GET request and decode the JSON body.

    Args:
        url: The API endpoint URL.
        params: Query parameters for the request.
        user_agent: Value of the User-Agent header.
        timeout: Request timeout in seconds, or None for no timeout.

    Returns:
        Decoded JSON body.

    Raises:
        FetchError: On transport failure or a non-2xx status.
        SchemaError: If the body is not valid JSON.
    """
    try:
        response = requests.get(
            url,
            params=params,
            headers={"User-Agent": user_agent},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise _augment_http_error(exc) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Forecast request to {url} failed: {exc}") from exc

    # raise_for_status lets unfollowed 3xx responses through
    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"Forecast request to {url} returned HTTP {response.status_code}",
            status_code=response.status_code,
            response=response,
        )

    try:
        return response.json()
    except (ValueError, requests.JSONDecodeError) as exc:
        raise SchemaError(f"Forecast response from {url} is not valid JSON: {exc}") from exc

def parse_weather_response(payload: Any) -> WeatherResponse:
    """Validate a decoded JSON body against the forecast schema.

    Raises:
        SchemaError: If the payload does not match the expected structure.
    """
    try:
        return WeatherResponse.model_validate(payload)
    except ValidationError as exc:
        raise SchemaError(
            f"Forecast response does not match the expected schema: {exc}"
        ) from exc

def fetch_weather(
    lat: float,
    lng: float,
    *,
    url: str = FORECAST_ENDPOINT,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
) -> WeatherResponse:
    """
    Fetch the complete forecast for a coordinate pair from MET Norway.

    Coordinates are not range-checked; the API's own rejection is reported
    as a FetchError.

    Args:
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.
        url: Forecast endpoint (default: FORECAST_ENDPOINT).
        user_agent: Identifying User-Agent header value.
        timeout: Request timeout in seconds, or None to wait indefinitely.

    Returns:
        Parsed forecast document.

    Raises:
        FetchError: If the request fails or returns a non-2xx status.
        SchemaError: If the body is not a forecast document.
    """
    params = build_params(lat, lng)
    LOGGER.debug("Requesting forecast from %s with %s", url, params)
    payload = _request_json(url, params, user_agent=user_agent, timeout=timeout)
    weather = parse_weather_response(payload)
    LOGGER.info(
        "Forecast updated at %s with %d entries",
        weather.properties.meta.updated_at,
        len(weather.timeseries),
    )
    return weather

__all__ = [
    "build_params",
    "fetch_weather",
    "parse_weather_response",
]
