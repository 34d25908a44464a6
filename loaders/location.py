"""
Location Resolver - Find the user's current position.

Fallback chain, each step tried exactly once:
1. Precise geolocation service (Mapbox geolocate API)
2. Device positioning (high accuracy, 60s timeout, 30s max cached age)
3. Fixed fallback coordinate

`resolve()` never raises; the returned fix is tagged with the step that
produced it.
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

import requests

from core.config import EngineConfig, PositionOptions
from core.models import GeoPoint, LocationFix, LocationSource

log = logging.getLogger(__name__)


class PositionUnavailableError(RuntimeError):
    """Device positioning could not produce a position."""


def checked_accuracy(value) -> float:
    """Accuracy radius in meters; must be finite and non-negative."""
    accuracy = float(value)
    if not math.isfinite(accuracy) or accuracy < 0:
        raise ValueError(f"Invalid accuracy: {value!r}")
    return accuracy


@dataclass
class DevicePosition:
    """A reading from the device's positioning hardware."""
    latitude: float
    longitude: float
    accuracy_meters: float
    timestamp: float = field(default_factory=time.time)


class DevicePositioning(Protocol):
    """Protocol for device positioning capabilities (interface)."""

    async def get_current_position(self, options: PositionOptions) -> DevicePosition:
        """
        Returns:
            Current position honoring `options`

        Raises:
            PositionUnavailableError: No position could be obtained
        """
        ...


class UnavailableDevicePositioning:
    """Device without positioning hardware; always fails."""

    async def get_current_position(self, options: PositionOptions) -> DevicePosition:
        raise PositionUnavailableError("Device positioning is not available")


class CallbackDevicePositioning:
    """
    Adapts a blocking position reader to DevicePositioning.

    A previous reading younger than `options.maximum_age_ms` is reused
    instead of querying the hardware again.
    """

    def __init__(self, reader: Callable[[bool], DevicePosition]):
        """
        Args:
            reader: Called with `enable_high_accuracy`; returns a reading
                or raises PositionUnavailableError
        """
        self.reader = reader
        self._last: Optional[DevicePosition] = None

    async def get_current_position(self, options: PositionOptions) -> DevicePosition:
        if self._last is not None:
            age = time.time() - self._last.timestamp
            if age <= options.maximum_age_seconds:
                log.debug(f"Reusing cached device position ({age:.1f}s old)")
                return self._last

        position = await asyncio.to_thread(self.reader, options.enable_high_accuracy)
        self._last = position
        return position


class PreciseGeolocationClient:
    """
    Client for the Mapbox geolocation API.

    The service is treated as a black box answering with
    `{latitude, longitude, accuracy}`.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.session = requests.Session()

    @property
    def available(self) -> bool:
        return bool(self.config.access_token)

    def _make_request(self) -> dict:
        response = self.session.post(
            self.config.geolocate_url,
            params={"access_token": self.config.access_token},
            timeout=self.config.request_timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    def locate(self) -> LocationFix:
        """
        Query the service once.

        Raises:
            requests.RequestException: Network or HTTP failure
            ValueError: Response is missing or has invalid coordinates
        """
        data = self._make_request()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected geolocation response: {data!r}")

        try:
            position = GeoPoint(float(data["latitude"]), float(data["longitude"]))
            accuracy = checked_accuracy(data["accuracy"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed geolocation response: {data!r}") from e

        return LocationFix(position, accuracy, LocationSource.PRECISE_SERVICE)


class LocationResolver:
    """Resolves a LocationFix through the fallback chain."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        precise_client: Optional[PreciseGeolocationClient] = None,
        device: Optional[DevicePositioning] = None,
    ):
        self.config = config or EngineConfig()
        self.precise_client = precise_client or PreciseGeolocationClient(self.config)
        self.device = device or UnavailableDevicePositioning()

    async def _from_precise_service(self) -> Optional[LocationFix]:
        if not self.precise_client.available:
            log.info("Precise geolocation service not configured, skipping")
            return None
        try:
            # requests blocks; keep it off the event loop
            return await asyncio.to_thread(self.precise_client.locate)
        except Exception as e:
            log.warning(f"Precise geolocation failed: {e}")
            return None

    async def _from_device(self) -> Optional[LocationFix]:
        options = self.config.position_options
        try:
            reading = await asyncio.wait_for(
                self.device.get_current_position(options),
                timeout=options.timeout_seconds,
            )
            return LocationFix(
                GeoPoint(reading.latitude, reading.longitude),
                checked_accuracy(reading.accuracy_meters),
                LocationSource.DEVICE_GPS,
            )
        except asyncio.TimeoutError:
            log.warning(f"Device positioning timed out after {options.timeout_seconds:g}s")
            return None
        except Exception as e:
            log.warning(f"Device positioning failed: {e}")
            return None

    def _fallback(self) -> LocationFix:
        return LocationFix(
            self.config.fallback_position,
            self.config.fallback_accuracy_meters,
            LocationSource.FALLBACK_DEFAULT,
        )

    async def resolve(self) -> LocationFix:
        """
        Resolve the user's position.

        Returns:
            LocationFix from the first step that succeeds; the fallback
            default if none do
        """
        fix = await self._from_precise_service()
        if fix is None:
            fix = await self._from_device()
        if fix is None:
            log.error("All location sources failed, using fallback position")
            fix = self._fallback()

        log.info(
            f"Location fix via {fix.source.value}: "
            f"({fix.position.latitude:.6f}, {fix.position.longitude:.6f}) ±{fix.accuracy_meters:g}m"
        )
        return fix

    async def live_position(self) -> Optional[GeoPoint]:
        """
        Sample the device for live tracking.

        Only real measurements count; returns None instead of a fallback so
        proximity is never judged against a made-up position.
        """
        fix = await self._from_device()
        return fix.position if fix else None
