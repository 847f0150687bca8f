# stationtraffic/traffic/filter.py
from __future__ import annotations

import pandas as pd


ANY_TIME = -1
WINDOW_MINUTES = 60
MINUTES_PER_DAY = 1440


def validate_time_filter(value) -> int:
    """
    Return the filter as an int: ANY_TIME or a minute of day in [0, 1439].
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid time filter: {value!r}")

    try:
        t = int(value)
    except (TypeError, OverflowError) as e:
        raise ValueError(f"invalid time filter: {value!r}") from e
    if t != value:
        raise ValueError(f"time filter must be a whole minute: {value!r}")
    if t != ANY_TIME and not 0 <= t < MINUTES_PER_DAY:
        raise ValueError(
            f"time filter must be {ANY_TIME} or within 0..{MINUTES_PER_DAY - 1}, got {t}"
        )
    return t


def minutes_since_midnight(ts: pd.Series) -> pd.Series:
    """Minute of day for each timestamp, NaN where the timestamp is NaT."""
    return ts.dt.hour * 60 + ts.dt.minute


def filter_trips_by_time(trips: pd.DataFrame, time_filter: int) -> pd.DataFrame:
    """
    Keep trips that start or end within WINDOW_MINUTES of time_filter.

    Differences are taken on the minute of day without wrapping midnight:
    a trip at 23:50 is 1420 minutes away from 00:10, not 20.
    ANY_TIME returns the input frame itself. The input is never modified.
    """
    time_filter = validate_time_filter(time_filter)
    if time_filter == ANY_TIME:
        return trips

    started = minutes_since_midnight(trips["started_at"])
    ended = minutes_since_midnight(trips["ended_at"])

    # NaT never matches a window
    near_start = started.notna() & ((started - time_filter).abs() <= WINDOW_MINUTES)
    near_end = ended.notna() & ((ended - time_filter).abs() <= WINDOW_MINUTES)

    return trips[near_start | near_end]
