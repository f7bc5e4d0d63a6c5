from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field, field_validator


QueryParams = list[tuple[str, str]]


def _join(*parts: str | None) -> str:
    return ",".join(p for p in parts if p)


def _fixed(value: float) -> str:
    text = repr(float(value))
    if "e" in text or "E" in text:
        # The service does not read exponent notation.
        text = f"{value:.10f}".rstrip("0").rstrip(".")
    return text


class LocationSpecifier(BaseModel, ABC):
    """Where to ask about. Subclasses know how to render themselves as query parameters."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def to_params(self) -> QueryParams:
        """Return the query parameters selecting this location."""


class CityName(LocationSpecifier):
    city: str
    country: str | None = None

    @field_validator("city")
    @classmethod
    def _require_city(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("city must be a non-empty string")
        return stripped

    @field_validator("country")
    @classmethod
    def _strip_country(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return value.strip() or None

    def to_params(self) -> QueryParams:
        return [("q", _join(self.city, self.country))]


class CityId(LocationSpecifier):
    city_id: int = Field(..., gt=0)

    def to_params(self) -> QueryParams:
        return [("id", str(self.city_id))]


class Coordinates(LocationSpecifier):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)

    def to_params(self) -> QueryParams:
        return [("lat", _fixed(self.lat)), ("lon", _fixed(self.lon))]


class ZipCode(LocationSpecifier):
    zip_code: str
    country: str | None = None

    @field_validator("zip_code")
    @classmethod
    def _require_zip(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("zip_code must be a non-empty string")
        return stripped

    def to_params(self) -> QueryParams:
        return [("zip", _join(self.zip_code, self.country))]
