from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from openweather.core.errors import ApiError, HttpStatusError, ParsingError
from openweather.schemas.weather import ErrorReport


logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _parse_error_report(body: bytes) -> ErrorReport:
    return ErrorReport.model_validate_json(body)


def decode_response(status_code: int, body: bytes, target: type[T]) -> T:
    """Map a raw response onto ``target`` or raise the matching error.

    ``target`` may be a model class or a generic alias such as ``list[UvIndex]``.
    """
    if not 200 <= status_code < 300:
        try:
            report = _parse_error_report(body)
        except ValidationError:
            text = body.decode("utf-8", errors="replace")
            logger.warning("Unexpected HTTP %s from OpenWeather: %s", status_code, text[:200])
            raise HttpStatusError(status_code, text) from None
        logger.warning("OpenWeather API error %s: %s", report.cod, report.message)
        raise ApiError(report, status_code)

    try:
        return _adapter(target).validate_json(body)
    except ValidationError as exc_target:
        # The service occasionally reports failures inside a 200 response.
        try:
            report = _parse_error_report(body)
        except ValidationError as exc_report:
            raise ParsingError(exc_target, exc_report) from exc_target
        if report.cod < 400:
            # Success payloads also carry cod/message; a 2xx cod here means the body changed shape.
            raise ParsingError(exc_target) from exc_target
        logger.warning("OpenWeather API error %s: %s", report.cod, report.message)
        raise ApiError(report, status_code) from exc_target
