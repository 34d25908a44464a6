"""
One-time dependency loading for AR sessions.

The rendering surface usually needs assets or runtime libraries loaded
before the first session can start. The gate runs the loaders at most once
per process; concurrent session starts await the same in-flight load. A
failed load is not remembered, so the next session start tries again.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence

log = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[None]]


class DependencyGate:
    """Memoized async initialization gate."""

    def __init__(self, loaders: Optional[Sequence[Loader]] = None):
        self.loaders: List[Loader] = list(loaders or [])
        self._loaded = False
        self._task: Optional[asyncio.Task] = None
        self.load_attempts = 0

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def _load_all(self) -> None:
        self.load_attempts += 1
        log.info(f"Loading {len(self.loaders)} session dependencies")
        await asyncio.gather(*(loader() for loader in self.loaders))
        self._loaded = True
        log.info("Session dependencies loaded")

    async def ensure_dependencies_loaded(self) -> None:
        """Load dependencies once; later and concurrent calls share the result."""
        if self._loaded:
            return

        if self._task is not None and self._task.get_loop() is not asyncio.get_running_loop():
            # left pending by a loop that has since stopped
            log.warning("Discarding dependency load started on another event loop")
            self._task = None

        if self._task is None or self._task.done():
            self._task = asyncio.ensure_future(self._load_all())

        task = self._task
        try:
            await asyncio.shield(task)
        except Exception as e:
            log.error(f"Dependency load failed: {e}")
            if self._task is task:
                self._task = None
            raise

    def reset(self) -> None:
        """Forget the loaded flag (tests, or after the host tears down its runtime)."""
        self._loaded = False
        self._task = None


# Process-wide gate
_gate: Optional[DependencyGate] = None


def get_dependency_gate() -> DependencyGate:
    """Get the singleton dependency gate."""
    global _gate
    if _gate is None:
        _gate = DependencyGate()
    return _gate


async def ensure_dependencies_loaded() -> None:
    await get_dependency_gate().ensure_dependencies_loaded()
