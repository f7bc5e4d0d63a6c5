"""Error types raised by the client."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from openweather.schemas.weather import ErrorReport


class OpenWeatherError(Exception):
    """Base class for everything the client raises."""


class InputError(OpenWeatherError, ValueError):
    """Raised before any I/O when call parameters are malformed."""


class TransportError(OpenWeatherError):
    """The request never produced an HTTP response (timeout, DNS, TLS, ...)."""


class HttpStatusError(OpenWeatherError):
    """Non-success status whose body is not a recognisable error payload."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class ApiError(OpenWeatherError):
    """The service answered with its own error payload."""

    def __init__(self, report: "ErrorReport", status_code: int) -> None:
        super().__init__(f"OpenWeather API error {report.cod}: {report.message}")
        self.report = report
        self.status_code = status_code


class ParsingError(OpenWeatherError):
    """The body matched neither the expected schema nor the error payload."""

    def __init__(self, error: Exception, report_error: Exception | None = None) -> None:
        message = f"Error parsing response: {error}"
        if report_error is not None:
            message += f" - parsing as error report: {report_error}"
        super().__init__(message)
        self.error = error
        self.report_error = report_error


__all__ = [
    "OpenWeatherError",
    "InputError",
    "TransportError",
    "HttpStatusError",
    "ApiError",
    "ParsingError",
]
