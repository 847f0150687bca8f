# stationtraffic/traffic/aggregate.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from stationtraffic.util.stations import Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StationTraffic:
    short_name: str
    arrivals: int
    departures: int

    @property
    def total_traffic(self) -> int:
        return self.arrivals + self.departures


def compute_station_traffic(
    stations: List[Station],
    trips: pd.DataFrame,
) -> Dict[str, StationTraffic]:
    """
    Count departures (by start_station_id) and arrivals (by end_station_id)
    for every station in the roster.

    Returns a new dict keyed by station code; stations with no trips get
    zeros. Trips pointing at codes outside the roster are counted in the
    groupings but never read, so they drop out silently.
    """
    codes = [s.short_name for s in stations]

    departures = trips.groupby("start_station_id").size()
    arrivals = trips.groupby("end_station_id").size()

    dep = departures.reindex(codes, fill_value=0).astype(int)
    arr = arrivals.reindex(codes, fill_value=0).astype(int)

    if logger.isEnabledFor(logging.DEBUG):
        known = set(codes)
        unmatched = int((~departures.index.isin(known)).sum()) + int(
            (~arrivals.index.isin(known)).sum()
        )
        logger.debug(
            "aggregated %d trips over %d stations (%d unmatched station codes)",
            len(trips),
            len(codes),
            unmatched,
        )

    return {
        code: StationTraffic(short_name=code, arrivals=int(a), departures=int(d))
        for code, a, d in zip(codes, arr.tolist(), dep.tolist())
    }
