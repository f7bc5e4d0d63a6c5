from __future__ import annotations

from collections.abc import Sequence

import httpx

from openweather.core.errors import InputError
from openweather.core.http import API_KEY_PARAM
from openweather.schemas.location import LocationSpecifier, QueryParams
from openweather.schemas.parameters import QueryOptions


CURRENT_WEATHER = "weather"
FORECAST_5_DAY = "forecast"
FORECAST_16_DAY = "forecast/daily"
ONE_CALL = "onecall"
ONE_CALL_TIMEMACHINE = "onecall/timemachine"
HISTORY_CITY = "history/city"
ACCUMULATED_TEMPERATURE = "history/accumulated_temperature"
ACCUMULATED_PRECIPITATION = "history/accumulated_precipitation"
UV_INDEX = "uvi"
UV_INDEX_FORECAST = "uvi/forecast"
UV_INDEX_HISTORY = "uvi/history"


def normalize_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url.strip())
    except httpx.InvalidURL as exc:
        raise InputError(f"Invalid base URL {base_url!r}: {exc}") from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise InputError(f"Base URL must be an absolute http(s) URL, got {base_url!r}")
    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return url


def build_url(
    base_url: httpx.URL,
    path: str,
    *,
    api_key: str,
    location: LocationSpecifier | None = None,
    extra: Sequence[tuple[str, str]] = (),
    options: QueryOptions | None = None,
) -> httpx.URL:
    """Join ``path`` onto the base and attach the query in the order the service documents."""
    params: QueryParams = []
    if location is not None:
        params.extend(location.to_params())
    params.extend(extra)
    params.append((API_KEY_PARAM, api_key))
    if options is not None:
        params.extend(options.to_params())
    return base_url.join(path.lstrip("/")).copy_with(params=params)
