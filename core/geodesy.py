"""
Great-circle distance helpers.
"""

import math

from core.models import GeoPoint

EARTH_RADIUS_METERS = 6371000


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points in meters."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = math.sin(delta_phi/2)**2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))

    return EARTH_RADIUS_METERS * c


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in meters between two GeoPoints."""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
