# stationtraffic/traffic/by_window.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import List

import pandas as pd
from tqdm import tqdm

from stationtraffic.traffic.aggregate import compute_station_traffic
from stationtraffic.traffic.filter import MINUTES_PER_DAY, filter_trips_by_time
from stationtraffic.util.stations import Station


def trip_counts_by_hour(trips: pd.DataFrame) -> List[int]:
    """
    Number of trips starting in each hour of the day (24 values).
    Trips without a valid start time are left out.
    """
    hours = trips["started_at"].dropna().dt.hour
    counts = hours.value_counts().reindex(range(24), fill_value=0)
    return [int(c) for c in counts.tolist()]


def build_station_traffic_by_window(
    *,
    stations: List[Station],
    trips: pd.DataFrame,
    out_csv_path: str | Path,
    step_minutes: int = 60,
    progress: bool = True,
) -> Path:
    """
    Writes a CSV of per-station traffic for every time-of-day window:

      station_id, t_min, arrivals, departures, total_traffic

    t_min runs 0, step, 2*step, ... < 1440; each row uses the same
    +-60 minute window the interactive filter applies.
    """
    step_minutes = int(step_minutes)
    if step_minutes <= 0:
        raise ValueError("step_minutes must be > 0")
    if MINUTES_PER_DAY % step_minutes != 0:
        raise ValueError("step_minutes must divide 1440 (e.g., 60, 30, 15, 10, 5, 1)")

    out_csv_path = Path(out_csv_path)
    windows = range(0, MINUTES_PER_DAY, step_minutes)
    it = tqdm(windows, desc="Aggregating windows") if progress else windows

    with open(out_csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["station_id", "t_min", "arrivals", "departures", "total_traffic"])

        for t_min in it:
            metrics = compute_station_traffic(stations, filter_trips_by_time(trips, t_min))
            for code, traffic in metrics.items():
                writer.writerow(
                    [code, t_min, traffic.arrivals, traffic.departures, traffic.total_traffic]
                )

    return out_csv_path
