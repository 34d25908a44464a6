"""
Demo runner: open an AR session on an in-memory surface and walk toward
the first corner of a sample parcel.
"""

import asyncio
import logging

from core import EngineConfig, GeoPoint, InMemorySurface
from core.session import ARSession
from loaders import LocationResolver, points_from_records

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s │ %(name)-20s │ %(levelname)-8s │ %(message)s',
    datefmt='%H:%M:%S',
    handlers=[
        logging.StreamHandler()
    ]
)
log = logging.getLogger("main")

SAMPLE_TITLE = "2.5 Acres near Lucerne Valley"
SAMPLE_BOUNDARY = [
    {"id": "pt1", "label": "Point 1", "lat": 33.551000, "lng": -117.644000},
    {"id": "pt2", "label": "Point 2", "lat": 33.551000, "lng": -117.643400},
    {"id": "pt3", "label": "Point 3", "lat": 33.550500, "lng": -117.643400},
    {"id": "pt4", "label": "Point 4", "lat": 33.550500, "lng": -117.644000},
]

# Start ~5m east of Point 1 and step west
WALK_START = GeoPoint(33.551000, -117.643946)
WALK_STEPS = 6
STEP_DEGREES = 0.00001


async def main():
    config = EngineConfig.from_env()
    surface = InMemorySurface()
    session = ARSession(surface, LocationResolver(config), config=config)

    points = points_from_records(SAMPLE_BOUNDARY)
    markers = await session.open(points, SAMPLE_TITLE)
    print(f"Mounted {len(markers)} markers, anchor via {session.anchor.source.value}")

    for step in range(WALK_STEPS):
        position = GeoPoint(WALK_START.latitude, WALK_START.longitude - step * STEP_DEGREES)
        states = session.tick(position)
        pt1 = states["pt1"]
        print(
            f"Step {step}: {pt1.distance_meters:6.2f}m to Point 1 -> {pt1.proximity.value.upper():4s} "
            f"(marker {surface.style_of('marker-pt1').color})"
        )

    session.close()


if __name__ == "__main__":
    asyncio.run(main())
