from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from openweather.schemas.location import QueryParams


class Unit(str, Enum):
    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


class Language(str, Enum):
    AFRIKAANS = "af"
    ALBANIAN = "al"
    ARABIC = "ar"
    AZERBAIJANI = "az"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CZECH = "cz"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    BASQUE = "eu"
    PERSIAN = "fa"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    HEBREW = "he"
    HINDI = "hi"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "kr"
    LATVIAN = "la"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    NORWEGIAN = "no"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt_br"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SWEDISH = "sv"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SERBIAN = "sr"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"
    CHINESE_SIMPLIFIED = "zh_cn"
    CHINESE_TRADITIONAL = "zh_tw"
    ZULU = "zu"


class QueryOptions(BaseModel):
    """Unit system and language shared by every endpoint."""

    model_config = ConfigDict(frozen=True)

    unit: Unit | None = None
    lang: Language | None = None

    def merged_over(self, defaults: "QueryOptions") -> "QueryOptions":
        return QueryOptions(
            unit=self.unit if self.unit is not None else defaults.unit,
            lang=self.lang if self.lang is not None else defaults.lang,
        )

    def to_params(self) -> QueryParams:
        params: QueryParams = []
        if self.unit is not None:
            params.append(("units", self.unit.value))
        if self.lang is not None:
            params.append(("lang", self.lang.value))
        return params
