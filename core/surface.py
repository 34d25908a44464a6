"""
Rendering surface seam.

The real surface (camera feed + 3-D scene) lives outside this engine. It
only has to accept MarkerSpecs and whole-element style updates keyed by
the specs' ids.
"""

import logging
from typing import Dict, List, Optional, Protocol, Sequence, Set

from core.models import ElementStyle, MarkerSpec

log = logging.getLogger(__name__)


class RenderingSurface(Protocol):
    """Protocol for rendering surfaces (interface)."""

    def mount(self, specs: Sequence[MarkerSpec]) -> None:
        """Create scene elements for the given markers."""
        ...

    def unmount_all(self) -> None:
        """Remove every element created by `mount`."""
        ...

    def has_element(self, element_id: str) -> bool:
        ...

    def set_style(self, element_id: str, style: ElementStyle) -> None:
        """Replace the full style of an element."""
        ...


class InMemorySurface:
    """
    Recording surface with no real scene behind it.

    Keeps the current style per element id and a log of every style write.
    Used by the demo runner and tests.
    """

    def __init__(self):
        self.specs: Dict[str, MarkerSpec] = {}
        self.styles: Dict[str, ElementStyle] = {}
        self.writes: List[tuple] = []
        self._element_ids: Set[str] = set()

    def mount(self, specs: Sequence[MarkerSpec]) -> None:
        for spec in specs:
            self.specs[spec.marker_id] = spec
            self._element_ids.add(spec.marker_id)
            self.styles.pop(spec.marker_id, None)
            if spec.ring_id:
                self._element_ids.add(spec.ring_id)
                self.styles.pop(spec.ring_id, None)
        log.debug(f"Mounted {len(specs)} markers")

    def unmount_all(self) -> None:
        self.specs.clear()
        self.styles.clear()
        self._element_ids.clear()

    def element_ids(self) -> List[str]:
        return sorted(self._element_ids)

    def has_element(self, element_id: str) -> bool:
        return element_id in self._element_ids

    def set_style(self, element_id: str, style: ElementStyle) -> None:
        self.styles[element_id] = style
        self.writes.append((element_id, style))

    def style_of(self, element_id: str) -> Optional[ElementStyle]:
        return self.styles.get(element_id)

    def __repr__(self) -> str:
        return f"InMemorySurface(markers={len(self.specs)}, styled={len(self.styles)})"
