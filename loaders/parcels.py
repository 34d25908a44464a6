"""
Parcel boundary sources.

Converts what the property data source hands us (persisted boundary point
records, or a parcel-lookup GeoJSON response) into BoundaryPoints. Nothing
here fetches data; the caller supplies the already-loaded payload.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence

from core.models import BoundaryPoint, GeoPoint

log = logging.getLogger(__name__)


def parse_coordinate_text(text: str) -> GeoPoint:
    """
    Parse a manually entered "lat, lng" pair.

    Raises:
        ValueError: Not two numbers, or out of range
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat, lng', got {text!r}")
    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise ValueError(f"Coordinates must be numeric, got {text!r}") from e
    return GeoPoint(lat, lng)


def points_from_records(records: Iterable[Dict[str, Any]]) -> List[BoundaryPoint]:
    """
    Build BoundaryPoints from persisted `{id, label, lat, lng}` records.

    Raises:
        ValueError: A record is missing a field or has bad coordinates
    """
    points = []
    for index, record in enumerate(records):
        try:
            position = GeoPoint(float(record["lat"]), float(record["lng"]))
            point_id = str(record["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid boundary point record #{index}: {record!r}") from e
        label = record.get("label") or f"Point {index + 1}"
        points.append(BoundaryPoint(point_id, label, position))
    return points


def points_from_parcel_feature(response: Dict[str, Any]) -> List[BoundaryPoint]:
    """
    Extract corner points from a parcel-lookup response.

    Expects `{"parcels": {"features": [{"geometry": {"type": "Polygon",
    "coordinates": [[[lng, lat], ...]]}}]}}`. The first feature's outer ring
    is used. GeoJSON rings repeat the first vertex at the end; that closing
    vertex is dropped.

    Returns:
        Points labelled "Point 1".."Point N" with ids pt1..ptN, or an empty
        list when there is no usable polygon
    """
    features = (response.get("parcels") or {}).get("features") or []
    if not features:
        log.warning("No parcel found in lookup response")
        return []

    geometry = features[0].get("geometry") or {}
    if geometry.get("type") != "Polygon" or not geometry.get("coordinates"):
        log.warning("No polygon geometry found in parcel lookup response")
        return []

    ring = list(geometry["coordinates"][0])
    if len(ring) > 1 and list(ring[0]) == list(ring[-1]):
        ring = ring[:-1]

    if len(ring) < 3:
        log.warning(f"Parcel polygon has only {len(ring)} vertices")
        return []

    points = []
    for index, coord in enumerate(ring):
        lng, lat = float(coord[0]), float(coord[1])
        points.append(BoundaryPoint(f"pt{index + 1}", f"Point {index + 1}", GeoPoint(lat, lng)))

    log.info(f"Extracted {len(points)} boundary points from parcel lookup")
    return points


def to_lng_lat_ring(points: Sequence[BoundaryPoint]) -> List[List[float]]:
    """Map-rendering coordinates `[lng, lat]`; empty below three points."""
    if len(points) < 3:
        return []
    return [[p.lng, p.lat] for p in points]


def to_records(points: Sequence[BoundaryPoint]) -> List[Dict[str, Any]]:
    """Inverse of `points_from_records`, for persisting edited corners."""
    return [{"id": p.id, "label": p.label, "lat": p.lat, "lng": p.lng} for p in points]
