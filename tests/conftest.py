import pytest

from openweather.client import OpenWeatherClient
from openweather.core.config import Settings


CONDITION = {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}


@pytest.fixture()
def settings():
    return Settings(_env_file=None, api_key="test-key")


@pytest.fixture()
def client(settings):
    with OpenWeatherClient(settings=settings) as c:
        yield c


@pytest.fixture()
def current_payload():
    return {
        "coord": {"lon": -93.26, "lat": 44.98},
        "weather": [CONDITION],
        "base": "stations",
        "main": {
            "temp": 21.5,
            "feels_like": 20.9,
            "temp_min": 19.0,
            "temp_max": 23.1,
            "pressure": 1015,
            "humidity": 48,
        },
        "visibility": 10000,
        "wind": {"speed": 4.1, "deg": 220},
        "clouds": {"all": 0},
        "rain": {"1h": 0.25},
        "dt": 1560350645,
        "sys": {"type": 1, "id": 5829, "country": "US", "sunrise": 1560334291, "sunset": 1560390105},
        "timezone": -18000,
        "id": 5037649,
        "name": "Minneapolis",
        "cod": 200,
    }


@pytest.fixture()
def forecast_payload():
    return {
        "cod": "200",
        "message": 0,
        "cnt": 2,
        "list": [
            {
                "dt": 1560358800,
                "main": {"temp": 22.0, "pressure": 1014, "humidity": 50, "temp_kf": 0.3},
                "weather": [CONDITION],
                "clouds": {"all": 5},
                "wind": {"speed": 3.2, "deg": 200},
                "pop": 0.1,
                "sys": {"pod": "d"},
                "dt_txt": "2019-06-12 17:00:00",
            },
            {
                "dt": 1560369600,
                "main": {"temp": 18.4},
                "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}],
                "rain": {"3h": 1.5},
                "dt_txt": "2019-06-12 20:00:00",
            },
        ],
        "city": {
            "id": 5037649,
            "name": "Minneapolis",
            "coord": {"lat": 44.98, "lon": -93.26},
            "country": "US",
            "population": 382578,
            "timezone": -18000,
        },
    }


@pytest.fixture()
def uv_payload():
    return {"lat": 44.98, "lon": -93.26, "date_iso": "2019-06-12T12:00:00Z", "date": 1560340800, "value": 7.52}
