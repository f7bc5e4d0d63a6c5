import httpx
import pytest

from openweather.core.errors import InputError
from openweather.core.http import redact_url
from openweather.schemas.location import CityName, Coordinates
from openweather.schemas.parameters import Language, QueryOptions, Unit
from openweather.services import urls


def test_normalize_base_url_appends_slash():
    url = urls.normalize_base_url("https://example.com/data/2.5")
    assert str(url) == "https://example.com/data/2.5/"


@pytest.mark.parametrize("bad", ["", "not a url", "ftp://example.com/", "/relative/path"])
def test_normalize_base_url_rejects_non_http(bad):
    with pytest.raises(InputError):
        urls.normalize_base_url(bad)


def test_build_url_orders_query():
    base = urls.normalize_base_url("https://api.openweathermap.org/data/2.5/")
    url = urls.build_url(
        base,
        urls.FORECAST_16_DAY,
        api_key="k",
        location=CityName(city="Minneapolis", country="USA"),
        extra=[("cnt", "7")],
        options=QueryOptions(unit=Unit.METRIC, lang=Language.SPANISH),
    )
    assert url.path == "/data/2.5/forecast/daily"
    assert list(url.params.multi_items()) == [
        ("q", "Minneapolis,USA"),
        ("cnt", "7"),
        ("appid", "k"),
        ("units", "metric"),
        ("lang", "es"),
    ]


def test_build_url_without_options():
    base = urls.normalize_base_url("https://api.openweathermap.org/data/2.5")
    url = urls.build_url(base, urls.CURRENT_WEATHER, api_key="k", location=Coordinates(lat=1.5, lon=2.0))
    assert str(url) == "https://api.openweathermap.org/data/2.5/weather?lat=1.5&lon=2.0&appid=k"


def test_redact_url_hides_key():
    url = httpx.URL("https://api.openweathermap.org/data/2.5/weather", params={"q": "Oslo", "appid": "secret"})
    redacted = redact_url(url)
    assert "secret" not in redacted
    assert "q=Oslo" in redacted
