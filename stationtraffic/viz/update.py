# stationtraffic/viz/update.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from stationtraffic.traffic.aggregate import StationTraffic, compute_station_traffic
from stationtraffic.traffic.filter import (
    ANY_TIME,
    filter_trips_by_time,
    validate_time_filter,
)
from stationtraffic.traffic.scales import (
    departure_color,
    departure_ratio,
    radius_scale,
)
from stationtraffic.util.stations import Station
from stationtraffic.viz.labels import time_label, traffic_tooltip
from stationtraffic.viz.projection import VIEWPORT_EVENTS, Viewport, project_stations

logger = logging.getLogger(__name__)

# attribute changes animate, position changes are immediate
TRANSITION_MS = 500


@dataclass(frozen=True)
class StationAttributes:
    radius: float
    departure_ratio: float
    color: str
    tooltip: str


@dataclass(frozen=True)
class TrafficSnapshot:
    time_filter: int
    metrics: Mapping[str, StationTraffic]
    attributes: Mapping[str, StationAttributes]
    radius_range: Tuple[float, float]
    transition_ms: int = TRANSITION_MS

    @property
    def time_label(self) -> str:
        return time_label(self.time_filter)

    @property
    def is_filtered(self) -> bool:
        return self.time_filter != ANY_TIME


@dataclass(frozen=True)
class PositionSnapshot:
    event: str
    viewport: Viewport
    positions: Mapping[str, Tuple[float, float]]
    transition_ms: int = 0


Listener = Callable[[object], None]


def build_traffic_snapshot(
    stations: List[Station],
    trips: pd.DataFrame,
    time_filter: int,
) -> TrafficSnapshot:
    """
    Filter -> aggregate -> scales for one filter value.
    """
    time_filter = validate_time_filter(time_filter)

    active = filter_trips_by_time(trips, time_filter)
    metrics = compute_station_traffic(stations, active)
    scale = radius_scale(metrics, time_filter)

    attributes: Dict[str, StationAttributes] = {}
    for code, traffic in metrics.items():
        ratio = departure_ratio(traffic)
        attributes[code] = StationAttributes(
            radius=scale(traffic.total_traffic),
            departure_ratio=ratio,
            color=departure_color(ratio),
            tooltip=traffic_tooltip(traffic),
        )

    return TrafficSnapshot(
        time_filter=time_filter,
        metrics=MappingProxyType(metrics),
        attributes=MappingProxyType(attributes),
        radius_range=scale.range,
    )


class TrafficMap:
    """
    Holds the loaded roster and trip log and reacts to two kinds of events:

      - set_time_filter(t): rebuild metrics + marker attributes, animated
      - viewport_changed(event, viewport): reproject every station, immediate

    Each event produces a new immutable snapshot which is stored and pushed
    to every subscriber. The two event kinds are independent of each other.
    """

    def __init__(
        self,
        stations: List[Station],
        trips: pd.DataFrame,
        *,
        viewport: Optional[Viewport] = None,
        time_filter: int = ANY_TIME,
    ):
        if stations is None or trips is None:
            raise ValueError("TrafficMap needs both the station roster and the trip log")

        self.stations = list(stations)
        self.trips = trips
        self._listeners: List[Listener] = []

        self.snapshot = build_traffic_snapshot(self.stations, self.trips, time_filter)
        self.positions: Optional[PositionSnapshot] = None
        if viewport is not None:
            self.positions = self._project("moveend", viewport)

        logger.info(
            "traffic map ready: %d stations, %d trips",
            len(self.stations),
            len(self.trips),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, update) -> None:
        for listener in list(self._listeners):
            listener(update)

    def set_time_filter(self, time_filter: int) -> TrafficSnapshot:
        snapshot = build_traffic_snapshot(self.stations, self.trips, time_filter)
        self.snapshot = snapshot

        logger.debug(
            "time filter %s: %d departures from known stations",
            snapshot.time_label,
            sum(t.departures for t in snapshot.metrics.values()),
        )
        self._notify(snapshot)
        return snapshot

    def _project(self, event: str, viewport: Viewport) -> PositionSnapshot:
        if event not in VIEWPORT_EVENTS:
            raise ValueError(
                f"unknown viewport event {event!r}, expected one of {VIEWPORT_EVENTS}"
            )
        return PositionSnapshot(
            event=event,
            viewport=viewport,
            positions=MappingProxyType(project_stations(self.stations, viewport)),
        )

    def viewport_changed(self, event: str, viewport: Viewport) -> PositionSnapshot:
        positions = self._project(event, viewport)
        self.positions = positions
        self._notify(positions)
        return positions
