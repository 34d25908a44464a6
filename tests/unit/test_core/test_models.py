"""Tests for the core data models."""

import dataclasses

import pytest
from core.models import (
    GeoPoint, BoundaryPoint, LocationFix, LocationSource, Proximity, ProximityState
)


class TestGeoPoint:

    def test_valid_point(self):
        p = GeoPoint(33.550859, -117.644357)
        assert p.latitude == 33.550859
        assert p.longitude == -117.644357

    def test_edges_are_valid(self):
        GeoPoint(90.0, 180.0)
        GeoPoint(-90.0, -180.0)

    @pytest.mark.parametrize("lat,lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -200.0)])
    def test_out_of_range_rejected(self, lat, lon):
        with pytest.raises(ValueError):
            GeoPoint(lat, lon)

    def test_immutable(self):
        p = GeoPoint(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.latitude = 3.0

    def test_to_dict(self):
        assert GeoPoint(1.0, 2.0).to_dict() == {"latitude": 1.0, "longitude": 2.0}


def test_boundary_point_shortcuts():
    point = BoundaryPoint("pt1", "Point 1", GeoPoint(34.403, -117.519))
    assert point.lat == 34.403
    assert point.lng == -117.519


def test_location_fix_fallback_flag():
    fallback = LocationFix(GeoPoint(0.0, 0.0), 15.0, LocationSource.FALLBACK_DEFAULT)
    gps = LocationFix(GeoPoint(0.0, 0.0), 5.0, LocationSource.DEVICE_GPS)
    assert fallback.is_fallback
    assert not gps.is_fallback


def test_proximity_state_is_near():
    assert ProximityState("pt1", Proximity.NEAR, 1.0).is_near
    assert not ProximityState("pt1", Proximity.FAR, 9.0).is_near
