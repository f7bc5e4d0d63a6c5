from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class OWMModel(BaseModel):
    # Payload keys such as "1h" are not identifiers; accept aliases and attribute names alike.
    model_config = ConfigDict(populate_by_name=True)


class ErrorReport(OWMModel):
    cod: int
    message: str


class Coord(OWMModel):
    lat: float
    lon: float


class WeatherCondition(OWMModel):
    id: int = Field(..., description="Weather condition id.")
    main: str = Field(..., description="Group of weather parameters (Rain, Snow, ...).")
    description: str
    icon: str


class MainReadings(OWMModel):
    temp: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = Field(None, description="Atmospheric pressure (hPa).")
    humidity: int | None = Field(None, description="Humidity (%).")
    sea_level: float | None = None
    grnd_level: float | None = None
    temp_kf: float | None = None


class Wind(OWMModel):
    speed: float
    deg: float | None = None
    gust: float | None = None


class Clouds(OWMModel):
    all: int = Field(..., description="Cloudiness (%).")


class Precipitation(OWMModel):
    one_hour: float | None = Field(None, alias="1h")
    three_hours: float | None = Field(None, alias="3h")


class Sys(OWMModel):
    type: int | None = None
    id: int | None = None
    message: float | None = None
    country: str | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None


class WeatherReportCurrent(OWMModel):
    coord: Coord
    weather: list[WeatherCondition]
    base: str | None = None
    main: MainReadings
    visibility: int | None = None
    wind: Wind | None = None
    clouds: Clouds | None = None
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    dt: datetime
    sys: Sys | None = None
    timezone: int | None = Field(None, description="Shift in seconds from UTC.")
    id: int
    name: str
    cod: int


class City(OWMModel):
    id: int
    name: str
    coord: Coord | None = None
    country: str | None = None
    population: int | None = None
    timezone: int | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None


class ForecastSys(OWMModel):
    pod: str | None = Field(None, description="Part of the day, 'd' or 'n'.")


class ForecastItem(OWMModel):
    dt: datetime
    main: MainReadings
    weather: list[WeatherCondition]
    clouds: Clouds | None = None
    wind: Wind | None = None
    visibility: int | None = None
    pop: float | None = Field(None, description="Probability of precipitation (0..1).")
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    sys: ForecastSys | None = None
    dt_txt: str | None = None


class WeatherReport5Day(OWMModel):
    cod: int
    message: float | str | None = None
    cnt: int
    items: list[ForecastItem] = Field(..., alias="list")
    city: City


class DailyTemperature(OWMModel):
    day: float
    min: float | None = None
    max: float | None = None
    night: float | None = None
    eve: float | None = None
    morn: float | None = None


class FeelsLike(OWMModel):
    day: float
    night: float | None = None
    eve: float | None = None
    morn: float | None = None


class DailyForecastItem(OWMModel):
    dt: datetime
    sunrise: datetime | None = None
    sunset: datetime | None = None
    temp: DailyTemperature
    feels_like: FeelsLike | None = None
    pressure: float | None = None
    humidity: int | None = None
    weather: list[WeatherCondition]
    speed: float | None = None
    deg: float | None = None
    gust: float | None = None
    clouds: int | None = None
    pop: float | None = None
    rain: float | None = None
    snow: float | None = None


class WeatherReport16Day(OWMModel):
    city: City
    cod: int
    message: float | str | None = None
    cnt: int
    items: list[DailyForecastItem] = Field(..., alias="list")


class OneCallCurrent(OWMModel):
    dt: datetime
    sunrise: datetime | None = None
    sunset: datetime | None = None
    temp: float
    feels_like: float | None = None
    pressure: float | None = None
    humidity: int | None = None
    dew_point: float | None = None
    uvi: float | None = None
    clouds: int | None = None
    visibility: int | None = None
    wind_speed: float | None = None
    wind_deg: float | None = None
    wind_gust: float | None = None
    weather: list[WeatherCondition] = Field(default_factory=list)
    rain: Precipitation | None = None
    snow: Precipitation | None = None


class OneCallHourly(OneCallCurrent):
    pop: float | None = None


class OneCallDaily(OWMModel):
    dt: datetime
    sunrise: datetime | None = None
    sunset: datetime | None = None
    moonrise: datetime | None = None
    moonset: datetime | None = None
    moon_phase: float | None = None
    summary: str | None = None
    temp: DailyTemperature
    feels_like: FeelsLike | None = None
    pressure: float | None = None
    humidity: int | None = None
    dew_point: float | None = None
    wind_speed: float | None = None
    wind_deg: float | None = None
    wind_gust: float | None = None
    weather: list[WeatherCondition] = Field(default_factory=list)
    clouds: int | None = None
    pop: float | None = None
    rain: float | None = None
    snow: float | None = None
    uvi: float | None = None


class Alert(OWMModel):
    sender_name: str | None = None
    event: str
    start: datetime
    end: datetime
    description: str | None = None
    tags: list[str] = Field(default_factory=list)


class WeatherReportOneCall(OWMModel):
    lat: float
    lon: float
    timezone: str
    timezone_offset: int | None = None
    current: OneCallCurrent
    hourly: list[OneCallHourly] = Field(default_factory=list)
    daily: list[OneCallDaily] = Field(default_factory=list)
    alerts: list[Alert] = Field(default_factory=list)


class WeatherReportOneCallHistorical(OWMModel):
    lat: float
    lon: float
    timezone: str
    timezone_offset: int | None = None
    current: OneCallCurrent
    hourly: list[OneCallHourly] = Field(default_factory=list)


class HistoricalItem(OWMModel):
    dt: datetime
    main: MainReadings
    wind: Wind | None = None
    clouds: Clouds | None = None
    weather: list[WeatherCondition] = Field(default_factory=list)
    rain: Precipitation | None = None
    snow: Precipitation | None = None


class WeatherReportHistorical(OWMModel):
    message: str | None = None
    cod: int
    city_id: int
    calctime: float | None = None
    cnt: int
    items: list[HistoricalItem] = Field(..., alias="list")


class AccumulatedTemperature(OWMModel):
    day: date = Field(..., alias="date")
    temp: float
    count: int


class AccumulatedPrecipitation(OWMModel):
    day: date = Field(..., alias="date")
    rain: float
    count: int


class UvIndex(OWMModel):
    lat: float
    lon: float
    date_iso: datetime
    date: datetime
    value: float
