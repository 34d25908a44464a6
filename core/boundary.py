"""
Boundary Polygon Builder

Turns a property's corner list into an ordered polygon with a centroid.
"""

import logging
from typing import Sequence, Union

from core.models import BoundaryPoint, BoundaryPolygon, GeoPoint

log = logging.getLogger(__name__)

MIN_POLYGON_POINTS = 3


class EmptyBoundary:
    """
    Result of building from fewer than three points.

    Not an error: the caller renders the points as plain markers with no
    area fill and no centroid.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyBoundary()


def compute_centroid(points: Sequence[BoundaryPoint]) -> GeoPoint:
    """Mean latitude and mean longitude of the points."""
    if not points:
        raise ValueError("Cannot compute centroid of zero points")
    lat = sum(p.position.latitude for p in points) / len(points)
    lon = sum(p.position.longitude for p in points) / len(points)
    return GeoPoint(lat, lon)


class BoundaryPolygonBuilder:
    """
    Builds BoundaryPolygons from boundary point lists.

    Pure: no I/O and the input sequence is never modified.
    """

    def build(self, points: Sequence[BoundaryPoint]) -> Union[BoundaryPolygon, EmptyBoundary]:
        """
        Args:
            points: Boundary points in survey order

        Returns:
            BoundaryPolygon preserving input order, or EMPTY for < 3 points
        """
        if len(points) < MIN_POLYGON_POINTS:
            log.debug(f"{len(points)} boundary points is not an area, returning EMPTY")
            return EMPTY

        seen = set()
        for p in points:
            if p.id in seen:
                raise ValueError(f"Duplicate boundary point id: {p.id}")
            seen.add(p.id)

        ordered = tuple(points)
        return BoundaryPolygon(points=ordered, centroid=compute_centroid(ordered))
