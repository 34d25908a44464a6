"""
AR Session

Ties the engine together for one "view property in AR" session:

    open()  -> load dependencies, resolve anchor, build polygon, mount markers
    tick()  -> classify every point, then push styles (called per frame)
    follow()-> optional polling loop feeding tick() from live device fixes
    close() -> stop ticking, unmount, discard proximity state

Single-threaded and cooperative. tick() is synchronous; only location
resolution awaits.
"""

import asyncio
import logging
from typing import Dict, Optional, Sequence

from core.boundary import BoundaryPolygonBuilder, EmptyBoundary
from core.bootstrap import DependencyGate, get_dependency_gate
from core.config import EngineConfig
from core.feedback import VisualFeedbackController
from core.markers import MarkerPlacementPlanner
from core.models import (
    BoundaryPoint, BoundaryPolygon, GeoPoint, LocationFix, MarkerSpec,
    ProximityState, SessionSnapshot
)
from core.proximity import ProximityMonitor
from core.surface import RenderingSurface
from loaders.location import LocationResolver

log = logging.getLogger(__name__)


class ARSession:
    """One AR viewing session for a single property."""

    def __init__(
        self,
        surface: RenderingSurface,
        resolver: Optional[LocationResolver] = None,
        gate: Optional[DependencyGate] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self.surface = surface
        self.resolver = resolver or LocationResolver(self.config)
        self.gate = gate or get_dependency_gate()
        self.builder = BoundaryPolygonBuilder()

        self.anchor: Optional[LocationFix] = None
        self.polygon: Optional[BoundaryPolygon] = None
        self.markers: Sequence[MarkerSpec] = ()
        self.monitor: Optional[ProximityMonitor] = None
        self.controller: Optional[VisualFeedbackController] = None

        self._open = False
        # bumped on every open/close; a follow loop only serves its own epoch
        self._epoch = 0

    @property
    def is_open(self) -> bool:
        return self._open

    async def open(self, points: Sequence[BoundaryPoint], title: str = "") -> Sequence[MarkerSpec]:
        """
        Start the session.

        Args:
            points: Property boundary points in survey order
            title: Property title for the centroid marker

        Returns:
            The mounted marker specs
        """
        if self._open:
            self.close()

        await self.gate.ensure_dependencies_loaded()
        self.anchor = await self.resolver.resolve()

        polygon = self.builder.build(points)
        planner = MarkerPlacementPlanner(title)
        if isinstance(polygon, EmptyBoundary):
            log.info(f"{len(points)} boundary points, showing markers without area")
            self.polygon = None
            self.markers = planner.plan(list(points), self.anchor)
        else:
            self.polygon = polygon
            self.markers = planner.plan(polygon, self.anchor)

        tracked = [
            BoundaryPoint(m.point_id, m.label, m.position)
            for m in self.markers if m.tracked
        ]
        self.monitor = ProximityMonitor(tracked, self.config.boundary_threshold_meters)
        self.controller = VisualFeedbackController(self.surface)

        self.surface.mount(self.markers)
        self.controller.apply(self.monitor.states)
        self._open = True
        self._epoch += 1

        log.info(f"AR session opened for '{title}' with {len(tracked)} tracked points")
        return self.markers

    def tick(self, position: Optional[GeoPoint]) -> Dict[str, ProximityState]:
        """
        Process one frame.

        All points are classified before any style command goes out. With no
        live position the frame is skipped and nothing is sent.

        Returns:
            Proximity states after this frame (empty once closed)
        """
        if not self._open:
            return {}

        if position is None:
            return self.monitor.tick(None)

        states = self.monitor.tick(position)
        self.controller.apply(states)
        return states

    async def follow(self, interval_seconds: Optional[float] = None, max_ticks: Optional[int] = None) -> int:
        """
        Poll the device for live positions and tick until closed.

        The loop is bound to the session that was open when it started; it
        stops once that session closes, even if a new one has been opened.

        Returns:
            Number of ticks processed
        """
        interval = self.config.poll_interval_seconds if interval_seconds is None else interval_seconds
        epoch = self._epoch
        ticks = 0
        while self._serving(epoch) and (max_ticks is None or ticks < max_ticks):
            position = await self.resolver.live_position()
            # closed while waiting for the device
            if not self._serving(epoch):
                break
            self.tick(position)
            ticks += 1
            await asyncio.sleep(interval)
        log.info(f"Live tracking stopped after {ticks} ticks")
        return ticks

    def _serving(self, epoch: int) -> bool:
        return self._open and self._epoch == epoch

    def close(self) -> None:
        """End the session; proximity state is discarded, not kept."""
        self._open = False
        self._epoch += 1
        self.surface.unmount_all()
        self.monitor = None
        self.controller = None
        self.polygon = None
        self.markers = ()
        log.info("AR session closed")

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            is_open=self._open,
            anchor=self.anchor,
            marker_count=len(self.markers),
            tick_count=self.monitor.tick_count if self.monitor else 0,
            states=self.monitor.states if self.monitor else {},
        )
