from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List


@dataclass(frozen=True)
class Station:
    short_name: str
    lon: float
    lat: float
    name: str | None = None
    capacity: int | None = None


def _station_from_record(s: dict) -> Station:
    code = s.get("short_name")
    if code is None or str(code).strip() == "":
        raise ValueError(f"station record without short_name: {s!r}")

    cap = s.get("capacity")

    return Station(
        short_name=str(code).strip(),
        lon=float(s["lon"]),
        lat=float(s["lat"]),
        name=s.get("name"),
        capacity=int(cap) if cap is not None else None,
    )


def stations_from_records(records: Iterable[dict]) -> List[Station]:
    """
    Build the roster from raw station dicts (lon/lat may be numeric strings).
    Codes must be unique.
    """
    stations: List[Station] = []
    seen = set()

    for s in records:
        st = _station_from_record(s)
        if st.short_name in seen:
            raise ValueError(f"duplicate station short_name: {st.short_name}")
        seen.add(st.short_name)
        stations.append(st)

    return stations


def load_stations(path: str | Path) -> List[Station]:
    """
    Load Bike Share stations from station_information.json
    Returns a list of Station with only the fields we care about.
    """
    with open(path) as f:
        raw = json.load(f)["data"]["stations"]

    return stations_from_records(raw)
