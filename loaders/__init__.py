"""
Data loaders for the parcel AR engine.

Includes:
- Location resolution (Mapbox geolocate -> device GPS -> fallback)
- Parcel boundary sources (persisted records, parcel lookup GeoJSON)
"""

from loaders.location import (
    LocationResolver, PreciseGeolocationClient, DevicePosition,
    DevicePositioning, CallbackDevicePositioning, UnavailableDevicePositioning,
    PositionUnavailableError
)
from loaders.parcels import (
    parse_coordinate_text, points_from_records, points_from_parcel_feature,
    to_lng_lat_ring, to_records
)

__all__ = [
    # Location
    "LocationResolver",
    "PreciseGeolocationClient",
    "DevicePosition",
    "DevicePositioning",
    "CallbackDevicePositioning",
    "UnavailableDevicePositioning",
    "PositionUnavailableError",
    # Parcels
    "parse_coordinate_text",
    "points_from_records",
    "points_from_parcel_feature",
    "to_lng_lat_ring",
    "to_records",
]
