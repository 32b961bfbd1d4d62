import dataclasses
import math

import pytest

from airly.errors import InvalidParameterError
from airly.geo import MAX_EARTH_RADIUS_KM, GeoCircle, GeoPoint


@pytest.mark.parametrize("lat,lng", [(0, 0), (90, 180), (-90, -180), (54.347279, 18.653846), (-33.9, 151.2)])
def test_point_within_bounds_keeps_values(lat, lng):
    point = GeoPoint(lat, lng)
    assert point.lat == lat
    assert point.lng == lng


@pytest.mark.parametrize("lat,lng", [(90.0001, 0), (-91, 0), (0, 180.5), (0, -181), (math.nan, 0), (0, math.inf)])
def test_point_out_of_bounds_raises(lat, lng):
    with pytest.raises(InvalidParameterError, match="out of bounds"):
        GeoPoint(lat, lng)


def test_point_is_immutable():
    point = GeoPoint(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.lat = 3


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        GeoPoint(100, 0)


@pytest.mark.parametrize("radius", [0, 5, 5.5, MAX_EARTH_RADIUS_KM - 1, 6370.999])
def test_circle_radius_within_bounds(radius):
    circle = GeoCircle(GeoPoint(54.347279, 18.653846), radius)
    assert circle.radius_km == radius
    assert circle.point == GeoPoint(54.347279, 18.653846)


@pytest.mark.parametrize("radius", [-1, -0.01, MAX_EARTH_RADIUS_KM, 10_000, math.nan])
def test_circle_radius_out_of_bounds_raises(radius):
    with pytest.raises(InvalidParameterError):
        GeoCircle(GeoPoint(0, 0), radius)


def test_circle_requires_geo_point():
    with pytest.raises(InvalidParameterError):
        GeoCircle((54.3, 18.6), 5)


@pytest.mark.parametrize("lat,lng", [(True, 0), (0, False)])
def test_point_rejects_bool_coordinates(lat, lng):
    with pytest.raises(InvalidParameterError):
        GeoPoint(lat, lng)


def test_circle_rejects_bool_radius():
    with pytest.raises(InvalidParameterError):
        GeoCircle(GeoPoint(0, 0), True)
