from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OPENWEATHER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    user_agent: str = Field(default="openweather-python/0.1")

    # Defaults applied when a call does not pass its own QueryOptions.
    units: str | None = Field(default=None)
    lang: str | None = Field(default=None)

    @field_validator("api_key", "units", "lang")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return value
        stripped = value.strip()
        return stripped or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
