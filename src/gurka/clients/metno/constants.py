from __future__ import annotations
# API Endpoints
FORECAST_ENDPOINT = "https://api.met.no/weatherapi/locationforecast/2.0/complete"

# MET Norway rejects requests without an identifying User-Agent
DEFAULT_USER_AGENT = "Gurka 1.0"

# None keeps the transport default (wait indefinitely)
DEFAULT_TIMEOUT_SECONDS = None

__all__ = [
    "FORECAST_ENDPOINT",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT_SECONDS",
]
