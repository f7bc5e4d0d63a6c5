from __future__ import annotations

from openweather.schemas.location import CityId, CityName, Coordinates, LocationSpecifier, ZipCode
from openweather.schemas.parameters import Language, QueryOptions, Unit
from openweather.schemas.weather import ErrorReport

__all__ = [
    "LocationSpecifier",
    "CityName",
    "CityId",
    "Coordinates",
    "ZipCode",
    "Unit",
    "Language",
    "QueryOptions",
    "ErrorReport",
]
