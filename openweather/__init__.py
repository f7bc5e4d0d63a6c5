"""Typed synchronous client for the OpenWeatherMap JSON API."""
from __future__ import annotations

from openweather.client import OpenWeatherClient
from openweather.core.config import Settings, get_settings
from openweather.core.errors import (
    ApiError,
    HttpStatusError,
    InputError,
    OpenWeatherError,
    ParsingError,
    TransportError,
)
from openweather.schemas import (
    CityId,
    CityName,
    Coordinates,
    ErrorReport,
    Language,
    LocationSpecifier,
    QueryOptions,
    Unit,
    ZipCode,
)
from openweather.schemas.weather import (
    AccumulatedPrecipitation,
    AccumulatedTemperature,
    UvIndex,
    WeatherReport16Day,
    WeatherReport5Day,
    WeatherReportCurrent,
    WeatherReportHistorical,
    WeatherReportOneCall,
    WeatherReportOneCallHistorical,
)

__version__ = "0.1.0"

__all__ = [
    "OpenWeatherClient",
    "Settings",
    "get_settings",
    "OpenWeatherError",
    "InputError",
    "TransportError",
    "HttpStatusError",
    "ApiError",
    "ParsingError",
    "LocationSpecifier",
    "CityName",
    "CityId",
    "Coordinates",
    "ZipCode",
    "Unit",
    "Language",
    "QueryOptions",
    "ErrorReport",
    "WeatherReportCurrent",
    "WeatherReport5Day",
    "WeatherReport16Day",
    "WeatherReportOneCall",
    "WeatherReportOneCallHistorical",
    "WeatherReportHistorical",
    "AccumulatedTemperature",
    "AccumulatedPrecipitation",
    "UvIndex",
]
