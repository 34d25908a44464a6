"""
Core data models for the parcel AR engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LocationSource(Enum):
    """Where a location fix came from, best first."""
    PRECISE_SERVICE = "precise_service"
    DEVICE_GPS = "device_gps"
    FALLBACK_DEFAULT = "fallback_default"


class Proximity(Enum):
    """Proximity classification of the user relative to a boundary point."""
    NEAR = "near"
    FAR = "far"


class MarkerStyle(Enum):
    """Style tag handed to the rendering surface with each marker."""
    FAR = "far"
    NEAR = "near"
    CENTROID = "centroid"
    STATUS = "status"


class MarkerKind(Enum):
    BOUNDARY = "boundary"
    CENTROID = "centroid"
    STATUS = "status"


@dataclass(frozen=True)
class GeoPoint:
    """
    A WGS84 coordinate in decimal degrees.

    Immutable; out-of-range values are rejected at construction.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be in [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be in [-180, 180], got {self.longitude}")

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class BoundaryPoint:
    """A surveyed or looked-up corner of a property parcel."""
    id: str
    label: str
    position: GeoPoint

    @property
    def lat(self) -> float:
        return self.position.latitude

    @property
    def lng(self) -> float:
        return self.position.longitude


@dataclass(frozen=True)
class BoundaryPolygon:
    """
    Ordered boundary points of a parcel.

    Order is survey/traversal order as supplied, never geometrically sorted.
    The centroid is the coordinate-wise arithmetic mean of the points, which
    drifts from the true centroid on large or strongly non-convex parcels.
    """
    points: Tuple[BoundaryPoint, ...]
    centroid: GeoPoint

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def point_ids(self) -> List[str]:
        return [p.id for p in self.points]


@dataclass(frozen=True)
class LocationFix:
    """One resolved user position, tagged with its provenance."""
    position: GeoPoint
    accuracy_meters: float
    source: LocationSource

    @property
    def is_fallback(self) -> bool:
        return self.source is LocationSource.FALLBACK_DEFAULT


@dataclass(frozen=True)
class ProximityState:
    """Classification of one boundary point on one tick."""
    point_id: str
    proximity: Proximity
    distance_meters: float

    @property
    def is_near(self) -> bool:
        return self.proximity is Proximity.NEAR


@dataclass(frozen=True)
class MarkerSpec:
    """
    Everything the rendering surface needs to place one marker.

    World anchoring from `position` is the surface's job; `marker_id` and
    `ring_id` are the keys style commands are addressed to.
    """
    point_id: str
    label: str
    position: GeoPoint
    style: MarkerStyle
    kind: MarkerKind = MarkerKind.BOUNDARY
    marker_id: str = ""
    ring_id: Optional[str] = None
    tracked: bool = True


@dataclass(frozen=True)
class ElementStyle:
    """Full visual specification of one scene element."""
    color: str
    opacity: float
    animation: Optional[str] = None


@dataclass(frozen=True)
class StyleCommand:
    """Set the complete style of a single scene element."""
    element_id: str
    style: ElementStyle


@dataclass
class SessionSnapshot:
    """Read-only summary of an AR session, for status displays and logs."""
    is_open: bool
    anchor: Optional[LocationFix] = None
    marker_count: int = 0
    tick_count: int = 0
    states: Dict[str, ProximityState] = field(default_factory=dict)
