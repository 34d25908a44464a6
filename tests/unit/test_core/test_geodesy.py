"""Tests for haversine distance."""

import math

import pytest
from core.geodesy import haversine_distance, distance_between, EARTH_RADIUS_METERS
from core.models import GeoPoint


def test_zero_distance_to_self():
    assert haversine_distance(33.5510, -117.6440, 33.5510, -117.6440) == 0.0

@pytest.mark.parametrize("a,b", [
    ((33.5510, -117.6440), (33.5510, -117.64395)),
    ((36.9741, -122.0308), (37.7749, -122.4194)),
    ((-45.0, 170.0), (45.0, -170.0)),
    ((0.0, 0.0), (0.0, 0.0001)),
])
def test_symmetric(a, b):
    assert haversine_distance(*a, *b) == pytest.approx(haversine_distance(*b, *a), abs=1e-9)

def test_one_degree_of_latitude():
    """One degree along a meridian is R * pi / 180."""
    expected = EARTH_RADIUS_METERS * math.pi / 180
    assert haversine_distance(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected, rel=1e-9)

def test_short_east_west_distance():
    # 0.00005 degrees of longitude at ~33.55N is a few meters
    d = haversine_distance(33.5510, -117.6440, 33.5510, -117.64395)
    assert 4.0 < d < 5.0

def test_distance_between_geopoints():
    a = GeoPoint(33.5510, -117.6440)
    b = GeoPoint(33.5510, -117.64395)
    assert distance_between(a, b) == haversine_distance(33.5510, -117.6440, 33.5510, -117.64395)
