from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone as dt_timezone
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from openweather.core.config import Settings, get_settings
from openweather.core.errors import InputError
from openweather.core.http import create_http_client, fetch
from openweather.schemas.location import CityId, CityName, Coordinates, LocationSpecifier
from openweather.schemas.parameters import Language, QueryOptions, Unit
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
from openweather.services import urls
from openweather.services.decoder import decode_response


T = TypeVar("T")

MAX_DAILY_FORECAST_DAYS = 16
MAX_UV_FORECAST_DAYS = 8

TimeArg = datetime | int


def _unix_seconds(value: TimeArg, name: str) -> int:
    if isinstance(value, bool):
        raise InputError(f"{name} must be a datetime or unix seconds")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt_timezone.utc)
        seconds = int(value.timestamp())
    elif isinstance(value, int):
        seconds = value
    else:
        raise InputError(f"{name} must be a datetime or unix seconds")
    if seconds < 0:
        raise InputError(f"{name} must not be before the unix epoch")
    return seconds


def _time_range(start: TimeArg, end: TimeArg) -> tuple[int, int]:
    start_s = _unix_seconds(start, "start")
    end_s = _unix_seconds(end, "end")
    if start_s > end_s:
        raise InputError(f"start ({start_s}) is after end ({end_s})")
    return start_s, end_s


def _check_days(days: int, maximum: int) -> None:
    if isinstance(days, bool) or not isinstance(days, int) or not 1 <= days <= maximum:
        raise InputError(f"Only support 1 to {maximum} day forecasts but {days!r} requested")


def _make(model: type[T], **fields: Any) -> T:
    try:
        return model(**fields)
    except ValidationError as exc:
        raise InputError(str(exc)) from exc


class OpenWeatherClient:
    """Synchronous client for the OpenWeatherMap 2.5 JSON endpoints.

    Every call performs exactly one GET. Keys, base URL, timeout and default
    unit/language come from :class:`Settings` unless passed explicitly.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
        unit: Unit | str | None = None,
        lang: Language | str | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        key = (api_key or self.settings.api_key or "").strip()
        if not key:
            raise InputError(
                "API key for OpenWeatherMap is required. Pass it explicitly or set OPENWEATHER_API_KEY."
            )
        self.api_key = key
        self.base_url = urls.normalize_base_url(self.settings.base_url)
        self.defaults = _make(
            QueryOptions,
            unit=unit if unit is not None else self.settings.units,
            lang=lang if lang is not None else self.settings.lang,
        )
        self._owns_client = http_client is None
        self.http_client = http_client or create_http_client(self.settings)

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(
        self,
        path: str,
        target: Any,
        *,
        location: LocationSpecifier | None = None,
        extra: Sequence[tuple[str, str]] = (),
        options: QueryOptions | None = None,
    ) -> Any:
        if location is not None and not isinstance(location, LocationSpecifier):
            raise InputError(f"location must be a LocationSpecifier, got {type(location).__name__}")
        if options is not None and not isinstance(options, QueryOptions):
            raise InputError(f"options must be QueryOptions, got {type(options).__name__}")
        merged = options.merged_over(self.defaults) if options is not None else self.defaults
        url = urls.build_url(
            self.base_url,
            path,
            api_key=self.api_key,
            location=location,
            extra=extra,
            options=merged,
        )
        resp = fetch(self.http_client, url)
        return decode_response(resp.status_code, resp.content, target)

    # Current weather

    def get_current_weather(
        self, location: LocationSpecifier, options: QueryOptions | None = None
    ) -> WeatherReportCurrent:
        return self._get(urls.CURRENT_WEATHER, WeatherReportCurrent, location=location, options=options)

    def current_weather_by_city(
        self, city: str, country: str | None = None, options: QueryOptions | None = None
    ) -> WeatherReportCurrent:
        return self.get_current_weather(_make(CityName, city=city, country=country), options)

    def current_weather_by_coordinates(
        self, lat: float, lon: float, options: QueryOptions | None = None
    ) -> WeatherReportCurrent:
        return self.get_current_weather(_make(Coordinates, lat=lat, lon=lon), options)

    def current_weather_by_city_id(
        self, city_id: int, options: QueryOptions | None = None
    ) -> WeatherReportCurrent:
        return self.get_current_weather(_make(CityId, city_id=city_id), options)

    # Forecasts

    def get_5_day_forecast(
        self, location: LocationSpecifier, options: QueryOptions | None = None
    ) -> WeatherReport5Day:
        return self._get(urls.FORECAST_5_DAY, WeatherReport5Day, location=location, options=options)

    def forecast_by_city(
        self, city: str, country: str | None = None, options: QueryOptions | None = None
    ) -> WeatherReport5Day:
        return self.get_5_day_forecast(_make(CityName, city=city, country=country), options)

    def forecast_by_coordinates(
        self, lat: float, lon: float, options: QueryOptions | None = None
    ) -> WeatherReport5Day:
        return self.get_5_day_forecast(_make(Coordinates, lat=lat, lon=lon), options)

    def forecast_by_city_id(self, city_id: int, options: QueryOptions | None = None) -> WeatherReport5Day:
        return self.get_5_day_forecast(_make(CityId, city_id=city_id), options)

    def get_16_day_forecast(
        self, location: LocationSpecifier, days: int, options: QueryOptions | None = None
    ) -> WeatherReport16Day:
        _check_days(days, MAX_DAILY_FORECAST_DAYS)
        return self._get(
            urls.FORECAST_16_DAY,
            WeatherReport16Day,
            location=location,
            extra=[("cnt", str(days))],
            options=options,
        )

    # One Call

    def get_one_call_current(
        self, coordinates: Coordinates, options: QueryOptions | None = None
    ) -> WeatherReportOneCall:
        return self._get(
            urls.ONE_CALL,
            WeatherReportOneCall,
            location=coordinates,
            extra=[("exclude", "minutely,hourly")],
            options=options,
        )

    def get_one_call_historical(
        self, coordinates: Coordinates, dt: TimeArg, options: QueryOptions | None = None
    ) -> WeatherReportOneCallHistorical:
        return self._get(
            urls.ONE_CALL_TIMEMACHINE,
            WeatherReportOneCallHistorical,
            location=coordinates,
            extra=[("dt", str(_unix_seconds(dt, "dt")))],
            options=options,
        )

    # History

    def get_historical_data(
        self,
        location: LocationSpecifier,
        start: TimeArg,
        end: TimeArg,
        options: QueryOptions | None = None,
    ) -> WeatherReportHistorical:
        start_s, end_s = _time_range(start, end)
        return self._get(
            urls.HISTORY_CITY,
            WeatherReportHistorical,
            location=location,
            extra=[("type", "hour"), ("start", str(start_s)), ("end", str(end_s))],
            options=options,
        )

    def get_accumulated_temperature(
        self,
        location: LocationSpecifier,
        start: TimeArg,
        end: TimeArg,
        threshold: int,
        options: QueryOptions | None = None,
    ) -> list[AccumulatedTemperature]:
        return self._accumulated(
            urls.ACCUMULATED_TEMPERATURE, list[AccumulatedTemperature], location, start, end, threshold, options
        )

    def get_accumulated_precipitation(
        self,
        location: LocationSpecifier,
        start: TimeArg,
        end: TimeArg,
        threshold: int,
        options: QueryOptions | None = None,
    ) -> list[AccumulatedPrecipitation]:
        return self._accumulated(
            urls.ACCUMULATED_PRECIPITATION, list[AccumulatedPrecipitation], location, start, end, threshold, options
        )

    def _accumulated(
        self,
        path: str,
        target: Any,
        location: LocationSpecifier,
        start: TimeArg,
        end: TimeArg,
        threshold: int,
        options: QueryOptions | None,
    ) -> Any:
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise InputError(f"threshold must be a non-negative integer, got {threshold!r}")
        start_s, end_s = _time_range(start, end)
        return self._get(
            path,
            target,
            location=location,
            extra=[
                ("type", "hour"),
                ("start", str(start_s)),
                ("end", str(end_s)),
                ("threshold", str(threshold)),
            ],
            options=options,
        )

    # UV index

    def get_current_uv_index(self, location: LocationSpecifier, options: QueryOptions | None = None) -> UvIndex:
        return self._get(urls.UV_INDEX, UvIndex, location=location, options=options)

    def get_forecast_uv_index(
        self, location: LocationSpecifier, days: int, options: QueryOptions | None = None
    ) -> list[UvIndex]:
        _check_days(days, MAX_UV_FORECAST_DAYS)
        return self._get(
            urls.UV_INDEX_FORECAST,
            list[UvIndex],
            location=location,
            extra=[("cnt", str(days))],
            options=options,
        )

    def get_historical_uv_index(
        self,
        location: LocationSpecifier,
        start: TimeArg,
        end: TimeArg,
        options: QueryOptions | None = None,
    ) -> list[UvIndex]:
        start_s, end_s = _time_range(start, end)
        return self._get(
            urls.UV_INDEX_HISTORY,
            list[UvIndex],
            location=location,
            extra=[("start", str(start_s)), ("end", str(end_s))],
            options=options,
        )
