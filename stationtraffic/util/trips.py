# stationtraffic/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd


# trailing UTC offset after a clock time: "08:05:00-05:00", "08:05Z"
_UTC_OFFSET = r"(?<=\d)(Z|[+-]\d{2}(?::?\d{2})?)$"

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def _normalize(df: pd.DataFrame) -> pd.DataFrame:
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips data missing columns: {', '.join(missing)}")

    out = pd.DataFrame(index=df.index)

    # ids stay strings, "" for blanks so they never match a station code
    for col in ("start_station_id", "end_station_id"):
        out[col] = df[col].fillna("").astype(str).str.strip()

    # parse timestamps once; bad values become NaT
    for col in ("started_at", "ended_at"):
        out[col] = _parse_local_time(df[col])

    return out.reset_index(drop=True)


def _parse_local_time(values: pd.Series) -> pd.Series:
    """
    Parse timestamps keeping the local clock time. UTC offsets are dropped,
    so a log spanning a DST change (-05:00 then -04:00) still parses and
    08:05 stays 08:05.
    """
    text = values.astype(str).str.strip()
    has_clock = text.str.contains(r"\d[T ]\d", regex=True)
    local = text.mask(has_clock, text.str.replace(_UTC_OFFSET, "", regex=True))
    return pd.to_datetime(local, format="ISO8601", errors="coerce")


def trips_frame(records: Iterable[dict]) -> pd.DataFrame:
    """
    Build a normalized trips DataFrame from in-memory records.
    """
    df = pd.DataFrame(list(records), columns=TRIP_COLUMNS)
    return _normalize(df)


def load_trips(trips_csv: str | Path) -> pd.DataFrame:
    """
    Loads a Bluebikes-style trips CSV with columns like:

      ride_id, rideable_type, started_at, ended_at,
      start_station_id, end_station_id, ...

    Returns a DataFrame with:
      - start_station_id (str)
      - end_station_id (str)
      - started_at (datetime, NaT when unparseable)
      - ended_at (datetime, NaT when unparseable)
    """
    df = pd.read_csv(
        Path(trips_csv),
        dtype={"start_station_id": str, "end_station_id": str},
        keep_default_na=False,
    )
    df.columns = [c.strip() for c in df.columns]

    return _normalize(df)
