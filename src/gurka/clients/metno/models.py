"""Pydantic models for the MET Norway Locationforecast 2.0 response."""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

class WeatherDetails(BaseModel):
    """Readings valid at one instant or over one forecast period.

    Every field is optional: the API leaves out values it cannot forecast at
    a given horizon, and a missing value stays ``None``.

    Attributes:
        air_pressure_at_sea_level: Pressure in hPa.
        air_temperature: Temperature in degrees Celsius.
        cloud_area_fraction: Cloud cover in percent.
        relative_humidity: Relative humidity in percent.
        wind_from_direction: Wind direction in degrees.
        wind_speed: Wind speed in m/s.
        wind_speed_of_gust: Gust speed in m/s.
        ultraviolet_index_clear_sky: UV index assuming a clear sky.
    """

    air_pressure_at_sea_level: Optional[float] = None
    air_temperature: Optional[float] = None
    cloud_area_fraction: Optional[float] = None
    relative_humidity: Optional[float] = None
    wind_from_direction: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_speed_of_gust: Optional[float] = None
    ultraviolet_index_clear_sky: Optional[float] = None

class Summary(BaseModel):
    symbol_code: str

class PeriodForecast(BaseModel):
    """Aggregated forecast for the next 1, 6 or 12 hours."""

    summary: Summary
    details: Optional[WeatherDetails] = None

class Instant(BaseModel):
    details: WeatherDetails

class TimeseriesData(BaseModel):
    instant: Instant
    next_1_hours: Optional[PeriodForecast] = None
    next_6_hours: Optional[PeriodForecast] = None
    next_12_hours: Optional[PeriodForecast] = None

class TimeseriesEntry(BaseModel):
    """One forecast sample.

    Attributes:
        time: UTC timestamp as sent by the API (``YYYY-MM-DDTHH:MM:SSZ``).
        data: Instant readings plus optional forward-looking periods.
    """

    time: str
    data: TimeseriesData

    @property
    def details(self) -> WeatherDetails:
        """Instant readings for this sample."""
        return self.data.instant.details

class Units(BaseModel):
    air_pressure_at_sea_level: str
    air_temperature: str
    cloud_area_fraction: str
    precipitation_amount: str
    relative_humidity: str
    wind_from_direction: str
    wind_speed: str

class Meta(BaseModel):
    updated_at: str
    units: Units

class Properties(BaseModel):
    meta: Meta
    timeseries: List[TimeseriesEntry] = Field(default_factory=list)

class Geometry(BaseModel):
    type: str
    coordinates: List[float]

class WeatherResponse(BaseModel):
    """Root of the Locationforecast GeoJSON document.

    Attributes:
        type: GeoJSON type tag, normally ``Feature``.
        geometry: Point the forecast was computed for.
        properties: Metadata and the chronological timeseries.
    """

    type: str
    geometry: Geometry
    properties: Properties

    @property
    def timeseries(self) -> List[TimeseriesEntry]:
        return self.properties.timeseries

__all__ = [
    "WeatherDetails",
    "Summary",
    "PeriodForecast",
    "Instant",
    "TimeseriesData",
    "TimeseriesEntry",
    "Units",
    "Meta",
    "Properties",
    "Geometry",
    "WeatherResponse",
]
