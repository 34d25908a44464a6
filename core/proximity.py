"""
Proximity Monitor

Classifies the user's live position against every boundary point on each
tick. Ticks are driven from outside (the rendering surface's frame callback
or a polling loop) and are expected to arrive strictly in sequence.

Two-state machine per point: FAR (initial) and NEAR, no hysteresis. A user
standing exactly on the threshold may flip between ticks.
"""

import logging
from typing import Dict, Iterable, Optional

from core.geodesy import distance_between
from core.models import BoundaryPoint, GeoPoint, Proximity, ProximityState

log = logging.getLogger(__name__)

# 10 ft, default of the generic single-target detector
GENERIC_PROXIMITY_THRESHOLD_METERS = 3.05
# Boundary corners use a tighter radius than the generic detector
BOUNDARY_PROXIMITY_THRESHOLD_METERS = 2.0


class ProximityDetector:
    """Classifies the distance from a live position to one target point."""

    def __init__(self, point: BoundaryPoint, distance: float = GENERIC_PROXIMITY_THRESHOLD_METERS):
        if distance < 0:
            raise ValueError(f"Proximity distance must be non-negative, got {distance}")
        self.point = point
        self.distance = distance

    def check(self, position: GeoPoint) -> ProximityState:
        meters = distance_between(position, self.point.position)
        proximity = Proximity.NEAR if meters <= self.distance else Proximity.FAR
        return ProximityState(self.point.id, proximity, meters)


class ProximityMonitor:
    """
    Per-point NEAR/FAR state for one AR session.

    State is owned here; `tick` hands out snapshot copies so readers never
    see it change underneath them.
    """

    def __init__(
        self,
        points: Iterable[BoundaryPoint],
        threshold_meters: float = BOUNDARY_PROXIMITY_THRESHOLD_METERS,
    ):
        self.threshold_meters = threshold_meters
        self._detectors = [ProximityDetector(p, threshold_meters) for p in points]
        self._states: Dict[str, ProximityState] = {}
        self.tick_count = 0
        self.reset()

    def reset(self) -> None:
        """Put every point back to FAR."""
        self._states = {
            d.point.id: ProximityState(d.point.id, Proximity.FAR, float("inf"))
            for d in self._detectors
        }
        self.tick_count = 0

    @property
    def states(self) -> Dict[str, ProximityState]:
        return dict(self._states)

    def tick(self, position: Optional[GeoPoint]) -> Dict[str, ProximityState]:
        """
        Classify every boundary point against the live position.

        Args:
            position: Live user position, or None when there is no lock yet

        Returns:
            Snapshot of all point states after this tick. With no position,
            the previous states are returned unchanged.
        """
        if position is None:
            log.debug("No live position this tick, keeping previous proximity states")
            return self.states

        updated = {d.point.id: d.check(position) for d in self._detectors}

        for point_id, state in updated.items():
            previous = self._states.get(point_id)
            if previous is not None and previous.proximity is not state.proximity:
                log.info(
                    f"Boundary point {point_id}: {previous.proximity.value} -> "
                    f"{state.proximity.value} ({state.distance_meters:.2f}m)"
                )

        self._states = updated
        self.tick_count += 1
        return self.states

    def __len__(self) -> int:
        return len(self._detectors)

    def __repr__(self) -> str:
        near = sum(1 for s in self._states.values() if s.is_near)
        return f"ProximityMonitor(points={len(self)}, near={near}, threshold={self.threshold_meters}m)"
