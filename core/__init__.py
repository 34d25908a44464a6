"""
Core module for the parcel AR engine.
Contains data models, the boundary pipeline, proximity tracking and session orchestration.
"""

from core.models import (
    GeoPoint, BoundaryPoint, BoundaryPolygon, LocationFix, LocationSource,
    Proximity, ProximityState, MarkerSpec, MarkerStyle, MarkerKind,
    ElementStyle, StyleCommand, SessionSnapshot
)
from core.geodesy import haversine_distance, distance_between, EARTH_RADIUS_METERS
from core.boundary import BoundaryPolygonBuilder, EMPTY, EmptyBoundary
from core.markers import MarkerPlacementPlanner
from core.proximity import (
    ProximityDetector, ProximityMonitor,
    BOUNDARY_PROXIMITY_THRESHOLD_METERS, GENERIC_PROXIMITY_THRESHOLD_METERS
)
from core.feedback import VisualFeedbackController
from core.surface import RenderingSurface, InMemorySurface
from core.config import EngineConfig, PositionOptions
from core.bootstrap import DependencyGate, get_dependency_gate, ensure_dependencies_loaded

__all__ = [
    # Models
    "GeoPoint",
    "BoundaryPoint",
    "BoundaryPolygon",
    "LocationFix",
    "LocationSource",
    "Proximity",
    "ProximityState",
    "MarkerSpec",
    "MarkerStyle",
    "MarkerKind",
    "ElementStyle",
    "StyleCommand",
    "SessionSnapshot",
    # Geometry
    "haversine_distance",
    "distance_between",
    "EARTH_RADIUS_METERS",
    "BoundaryPolygonBuilder",
    "EMPTY",
    "EmptyBoundary",
    # Placement & feedback
    "MarkerPlacementPlanner",
    "ProximityDetector",
    "ProximityMonitor",
    "BOUNDARY_PROXIMITY_THRESHOLD_METERS",
    "GENERIC_PROXIMITY_THRESHOLD_METERS",
    "VisualFeedbackController",
    "RenderingSurface",
    "InMemorySurface",
    # Config
    "EngineConfig",
    "PositionOptions",
    "DependencyGate",
    "get_dependency_gate",
    "ensure_dependencies_loaded",
]
