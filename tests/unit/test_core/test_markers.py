"""Tests for marker placement planning."""

import pytest
from core.boundary import BoundaryPolygonBuilder, EMPTY
from core.markers import (
    MarkerPlacementPlanner, describe_anchor, marker_id_for, ring_id_for, CENTROID_MARKER_ID
)
from core.models import (
    BoundaryPoint, GeoPoint, LocationFix, LocationSource, MarkerKind, MarkerStyle
)


@pytest.fixture
def anchor():
    return LocationFix(GeoPoint(33.550859, -117.644357), 15.0, LocationSource.FALLBACK_DEFAULT)

@pytest.fixture
def points():
    return [
        BoundaryPoint("a", "North", GeoPoint(33.5512, -117.6440)),
        BoundaryPoint("b", "East", GeoPoint(33.5510, -117.6436)),
        BoundaryPoint("c", "South", GeoPoint(33.5506, -117.6440)),
        BoundaryPoint("d", "West", GeoPoint(33.5510, -117.6444)),
    ]


def test_boundary_markers_follow_polygon_order(points, anchor):
    polygon = BoundaryPolygonBuilder().build(points)
    specs = MarkerPlacementPlanner("Lot 7").plan(polygon, anchor)

    boundary = [s for s in specs if s.kind == MarkerKind.BOUNDARY]
    assert [s.point_id for s in boundary] == ["a", "b", "c", "d"]
    assert [s.label for s in boundary] == ["North", "East", "South", "West"]

def test_boundary_markers_default_far_with_stable_ids(points, anchor):
    polygon = BoundaryPolygonBuilder().build(points)
    specs = MarkerPlacementPlanner().plan(polygon, anchor)

    first = specs[0]
    assert first.style == MarkerStyle.FAR
    assert first.marker_id == "marker-a"
    assert first.ring_id == "ring-a"
    assert first.tracked is True
    assert first.position == points[0].position

def test_centroid_marker(points, anchor):
    polygon = BoundaryPolygonBuilder().build(points)
    specs = MarkerPlacementPlanner("Lot 7").plan(polygon, anchor)

    centroids = [s for s in specs if s.kind == MarkerKind.CENTROID]
    assert len(centroids) == 1
    centroid = centroids[0]
    assert centroid.label == "Lot 7"
    assert centroid.position == polygon.centroid
    assert centroid.style == MarkerStyle.CENTROID
    assert centroid.tracked is False
    assert centroid.ring_id is None
    assert centroid.marker_id == CENTROID_MARKER_ID

def test_status_marker_at_anchor(points, anchor):
    polygon = BoundaryPolygonBuilder().build(points)
    specs = MarkerPlacementPlanner().plan(polygon, anchor)

    status = specs[-1]
    assert status.kind == MarkerKind.STATUS
    assert status.position == anchor.position
    assert "±15m" in status.label
    assert status.tracked is False

def test_points_without_area_have_no_centroid(points, anchor):
    specs = MarkerPlacementPlanner("Lot 7").plan(points[:2], anchor)
    kinds = [s.kind for s in specs]
    assert kinds == [MarkerKind.BOUNDARY, MarkerKind.BOUNDARY, MarkerKind.STATUS]

def test_empty_plans_only_status(anchor):
    specs = MarkerPlacementPlanner().plan(EMPTY, anchor)
    assert [s.kind for s in specs] == [MarkerKind.STATUS]

def test_id_helpers():
    assert marker_id_for("pt3") == "marker-pt3"
    assert ring_id_for("pt3") == "ring-pt3"

def test_describe_anchor(anchor):
    text = describe_anchor(anchor)
    assert "GPS Accuracy: ±15m" in text
    assert "33.550859, -117.644357" in text
