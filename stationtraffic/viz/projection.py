# stationtraffic/viz/projection.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from stationtraffic.util.stations import Station

# pan, zoom, resize and end of a pan/zoom gesture
VIEWPORT_EVENTS = ("move", "zoom", "resize", "moveend")

MAX_MERCATOR_LAT = 85.051129


@dataclass(frozen=True)
class Viewport:
    """
    Web Mercator viewport: map centre, zoom and container size in pixels.
    tile_size=512 matches Mapbox GL zoom levels, 256 matches Leaflet.
    """
    center_lon: float
    center_lat: float
    zoom: float
    width: int
    height: int
    tile_size: int = 512

    def _world(self, lon: float, lat: float) -> Tuple[float, float]:
        scale = self.tile_size * (2 ** self.zoom)
        lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))
        phi = math.radians(lat)

        x = (lon + 180.0) / 360.0 * scale
        y = (1.0 - math.log(math.tan(math.pi / 4 + phi / 2)) / math.pi) / 2.0 * scale
        return x, y

    def project(self, lon: float, lat: float) -> Tuple[float, float]:
        """Pixel position of (lon, lat) relative to the container's top-left."""
        cx, cy = self._world(self.center_lon, self.center_lat)
        x, y = self._world(lon, lat)
        return x - cx + self.width / 2, y - cy + self.height / 2


def project_station(station: Station, viewport: Viewport) -> Tuple[float, float]:
    return viewport.project(station.lon, station.lat)


def project_stations(
    stations: List[Station],
    viewport: Viewport,
) -> Dict[str, Tuple[float, float]]:
    """Full pass over every station; nothing is carried over from earlier calls."""
    return {s.short_name: project_station(s, viewport) for s in stations}
