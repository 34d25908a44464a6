"""
Marker Placement Planner

Shapes boundary points, the parcel centroid and the camera anchor into
MarkerSpecs for the rendering surface. No distance math and no drawing
happens here; the surface anchors each spec at its GeoPoint itself.
"""

import logging
from typing import List, Sequence, Union

from core.boundary import EmptyBoundary
from core.models import (
    BoundaryPoint, BoundaryPolygon, LocationFix, MarkerKind, MarkerSpec, MarkerStyle
)

log = logging.getLogger(__name__)

# Informational markers live outside the marker-<id>/ring-<id> namespace
CENTROID_MARKER_ID = "centroid-marker"
STATUS_MARKER_ID = "status-hud"


def marker_id_for(point_id: str) -> str:
    return f"marker-{point_id}"


def ring_id_for(point_id: str) -> str:
    return f"ring-{point_id}"


def describe_anchor(anchor: LocationFix) -> str:
    """Status text shown at the camera anchor."""
    pos = anchor.position
    return (
        f"GPS Accuracy: ±{anchor.accuracy_meters:g}m | "
        f"User: {pos.latitude:.6f}, {pos.longitude:.6f}"
    )


class MarkerPlacementPlanner:
    """Builds the marker set for one AR session."""

    def __init__(self, title: str = ""):
        """
        Args:
            title: Property title shown on the centroid marker
        """
        self.title = title

    def boundary_marker(self, point: BoundaryPoint) -> MarkerSpec:
        return MarkerSpec(
            point_id=point.id,
            label=point.label,
            position=point.position,
            style=MarkerStyle.FAR,
            kind=MarkerKind.BOUNDARY,
            marker_id=marker_id_for(point.id),
            ring_id=ring_id_for(point.id),
            tracked=True,
        )

    def plan(
        self,
        polygon: Union[BoundaryPolygon, EmptyBoundary, Sequence[BoundaryPoint]],
        anchor: LocationFix,
    ) -> List[MarkerSpec]:
        """
        Plan markers for a polygon.

        A full polygon yields one marker per point plus a centroid marker.
        A plain point sequence (the EMPTY case, 1-2 corners) yields point
        markers only. A status marker at the anchor is always last.

        Args:
            polygon: BoundaryPolygon, EMPTY, or an unordered point sequence
            anchor: Fix used as the initial camera anchor

        Returns:
            MarkerSpecs in polygon order
        """
        if isinstance(polygon, BoundaryPolygon):
            points = polygon.points
        elif isinstance(polygon, EmptyBoundary):
            points = ()
        else:
            points = tuple(polygon)

        specs = [self.boundary_marker(p) for p in points]

        if isinstance(polygon, BoundaryPolygon):
            specs.append(MarkerSpec(
                point_id="centroid",
                label=self.title,
                position=polygon.centroid,
                style=MarkerStyle.CENTROID,
                kind=MarkerKind.CENTROID,
                marker_id=CENTROID_MARKER_ID,
                tracked=False,
            ))

        specs.append(MarkerSpec(
            point_id="status",
            label=describe_anchor(anchor),
            position=anchor.position,
            style=MarkerStyle.STATUS,
            kind=MarkerKind.STATUS,
            marker_id=STATUS_MARKER_ID,
            tracked=False,
        ))

        log.info(
            f"Planned {len(points)} boundary markers for '{self.title}' "
            f"(anchor source: {anchor.source.value})"
        )
        return specs
