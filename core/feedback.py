"""
Visual Feedback Controller

Turns per-tick proximity states into style commands for the rendering
surface. Each command carries the element's complete style, so re-sending
the same classification every frame changes nothing.
"""

import logging
from typing import Dict, List, Mapping

from core.markers import marker_id_for, ring_id_for
from core.models import ElementStyle, Proximity, ProximityState, StyleCommand
from core.surface import RenderingSurface

log = logging.getLogger(__name__)

MARKER_OPACITY = 0.8
RING_OPACITY = 0.3
RING_PULSE = "pulse"

NEAR_COLOR = "green"
FAR_COLOR = "red"

STYLES: Dict[Proximity, Dict[str, ElementStyle]] = {
    Proximity.NEAR: {
        "marker": ElementStyle(color=NEAR_COLOR, opacity=MARKER_OPACITY),
        "ring": ElementStyle(color=NEAR_COLOR, opacity=RING_OPACITY, animation=RING_PULSE),
    },
    Proximity.FAR: {
        "marker": ElementStyle(color=FAR_COLOR, opacity=MARKER_OPACITY),
        "ring": ElementStyle(color=FAR_COLOR, opacity=RING_OPACITY, animation=RING_PULSE),
    },
}


def commands_for(state: ProximityState) -> List[StyleCommand]:
    """Style commands for one point's marker and ring."""
    styles = STYLES[state.proximity]
    return [
        StyleCommand(marker_id_for(state.point_id), styles["marker"]),
        StyleCommand(ring_id_for(state.point_id), styles["ring"]),
    ]


class VisualFeedbackController:
    """Applies proximity states to a rendering surface."""

    def __init__(self, surface: RenderingSurface):
        self.surface = surface
        self.applied_count = 0
        self.skipped_count = 0

    def apply(self, states: Mapping[str, ProximityState]) -> List[StyleCommand]:
        """
        Emit style commands for a full tick of states.

        Commands addressed to elements the surface doesn't have are dropped.

        Returns:
            The commands that were actually sent
        """
        sent = []
        for state in states.values():
            for command in commands_for(state):
                if not self.surface.has_element(command.element_id):
                    self.skipped_count += 1
                    log.debug(f"No element {command.element_id} on surface, skipping")
                    continue
                self.surface.set_style(command.element_id, command.style)
                sent.append(command)

        self.applied_count += len(sent)
        return sent
