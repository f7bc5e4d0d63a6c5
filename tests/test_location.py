import pytest
from pydantic import ValidationError

from openweather.schemas.location import CityId, CityName, Coordinates, LocationSpecifier, ZipCode
from openweather.schemas.parameters import Language, QueryOptions, Unit


def test_city_name_params():
    assert CityName(city="Minneapolis", country="US").to_params() == [("q", "Minneapolis,US")]
    assert CityName(city="  Paris ").to_params() == [("q", "Paris")]
    assert CityName(city="Paris", country="  ").to_params() == [("q", "Paris")]


def test_city_name_rejects_blank():
    with pytest.raises(ValidationError):
        CityName(city="   ")


def test_city_id_params():
    assert CityId(city_id=2643743).to_params() == [("id", "2643743")]
    with pytest.raises(ValidationError):
        CityId(city_id=0)


def test_coordinates_params_and_bounds():
    assert Coordinates(lat=37.65047, lon=-119.037439).to_params() == [("lat", "37.65047"), ("lon", "-119.037439")]
    with pytest.raises(ValidationError):
        Coordinates(lat=91, lon=0)
    with pytest.raises(ValidationError):
        Coordinates(lat=0, lon=-180.5)


def test_zip_code_params():
    assert ZipCode(zip_code="55401", country="us").to_params() == [("zip", "55401,us")]


def test_locations_are_immutable():
    loc = CityName(city="Oslo")
    with pytest.raises(ValidationError):
        loc.city = "Bergen"


def test_query_options_params():
    assert QueryOptions().to_params() == []
    opts = QueryOptions(unit=Unit.IMPERIAL, lang=Language.PORTUGUESE_BRAZIL)
    assert opts.to_params() == [("units", "imperial"), ("lang", "pt_br")]


def test_query_options_accept_plain_strings():
    opts = QueryOptions(unit="metric", lang="de")
    assert opts.unit is Unit.METRIC
    assert opts.lang is Language.GERMAN


def test_query_options_merge_prefers_call_values():
    defaults = QueryOptions(unit=Unit.METRIC, lang=Language.ENGLISH)
    merged = QueryOptions(lang=Language.FRENCH).merged_over(defaults)
    assert merged.unit is Unit.METRIC
    assert merged.lang is Language.FRENCH


def test_coordinates_never_use_exponent_notation():
    assert Coordinates(lat=0.00001, lon=0).to_params() == [("lat", "0.00001"), ("lon", "0.0")]
    assert Coordinates(lat=-0.000005, lon=1e-12).to_params() == [("lat", "-0.000005"), ("lon", "0")]


def test_location_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LocationSpecifier()
