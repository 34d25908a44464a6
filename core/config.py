"""
Engine configuration.

Defaults live on the dataclasses; `from_env` picks up API keys and
overrides from the environment.
"""

import logging
import os
from dataclasses import dataclass, field

from core.models import GeoPoint
from core.proximity import BOUNDARY_PROXIMITY_THRESHOLD_METERS

log = logging.getLogger(__name__)

# Last-resort position when neither the service nor the device can locate us
FALLBACK_LATITUDE = 33.550859
FALLBACK_LONGITUDE = -117.644357
FALLBACK_ACCURACY_METERS = 15.0

MAPBOX_GEOLOCATE_URL = "https://api.mapbox.com/geolocate/v1/geolocate"


@dataclass
class PositionOptions:
    """Options passed to the device's positioning capability."""
    enable_high_accuracy: bool = True
    timeout_ms: int = 60000
    maximum_age_ms: int = 30000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def maximum_age_seconds(self) -> float:
        return self.maximum_age_ms / 1000


@dataclass
class EngineConfig:
    """Settings for location resolution, proximity and live tracking."""
    geolocate_url: str = MAPBOX_GEOLOCATE_URL
    access_token: str = ""
    request_timeout_seconds: float = 10.0
    position_options: PositionOptions = field(default_factory=PositionOptions)
    fallback_position: GeoPoint = field(
        default_factory=lambda: GeoPoint(FALLBACK_LATITUDE, FALLBACK_LONGITUDE)
    )
    fallback_accuracy_meters: float = FALLBACK_ACCURACY_METERS
    boundary_threshold_meters: float = BOUNDARY_PROXIMITY_THRESHOLD_METERS
    poll_interval_seconds: float = 1.0

    @classmethod
    def from_env(cls) -> "EngineConfig":
        config = cls(access_token=os.environ.get("MAPBOX_ACCESS_TOKEN", ""))

        threshold = os.getenv("PARCEL_AR_BOUNDARY_THRESHOLD_M")
        if threshold:
            config.boundary_threshold_meters = float(threshold)

        interval = os.getenv("PARCEL_AR_POLL_INTERVAL_S")
        if interval:
            config.poll_interval_seconds = float(interval)

        if not config.access_token:
            log.warning("MAPBOX_ACCESS_TOKEN not set, precise geolocation will be skipped")
        return config
