# stationtraffic/traffic/scales.py
from __future__ import annotations

import math
from typing import Mapping, Sequence, Tuple

import numpy as np

from stationtraffic.traffic.aggregate import StationTraffic
from stationtraffic.traffic.filter import ANY_TIME

RADIUS_RANGE_ANY_TIME = (0.0, 25.0)
RADIUS_RANGE_FILTERED = (3.0, 50.0)

# 0 = more arrivals, 0.5 = balanced, 1 = more departures
DEPARTURE_RATIO_BUCKETS = (0.0, 0.5, 1.0)
BALANCED = 0.5

DEPARTURES_COLOR = (70, 130, 180)   # steelblue
ARRIVALS_COLOR = (255, 140, 0)      # darkorange


class SqrtScale:
    """
    Square-root scale: marker *area* grows linearly with the input.

    A collapsed domain (e.g. every station at zero) maps to the low end of
    the range.
    """

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        s0, s1 = math.sqrt(d0), math.sqrt(d1)
        if s1 == s0:
            return r0
        return r0 + (r1 - r0) * (math.sqrt(value) - s0) / (s1 - s0)


class QuantizeScale:
    """
    Split a continuous domain into len(range) equal segments.
    Values outside the domain fall into the first or last bucket.
    """

    def __init__(self, domain: Tuple[float, float], range_: Sequence[float]):
        if len(range_) < 1:
            raise ValueError("QuantizeScale needs at least one output value")
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = tuple(range_)
        n = len(self.range)
        self.thresholds = np.linspace(self.domain[0], self.domain[1], n + 1)[1:-1]

    def __call__(self, value: float):
        i = int(np.searchsorted(self.thresholds, value, side="right"))
        return self.range[i]


departure_ratio_scale = QuantizeScale((0.0, 1.0), DEPARTURE_RATIO_BUCKETS)


def radius_range(time_filter: int) -> Tuple[float, float]:
    return RADIUS_RANGE_ANY_TIME if time_filter == ANY_TIME else RADIUS_RANGE_FILTERED


def radius_scale(metrics: Mapping[str, StationTraffic], time_filter: int) -> SqrtScale:
    """
    Radius scale over [0, max total traffic] of the given metrics, with the
    wider range when a time filter is active.
    """
    max_total = max((t.total_traffic for t in metrics.values()), default=0)
    return SqrtScale((0, max_total), radius_range(time_filter))


def departure_ratio(traffic: StationTraffic) -> float:
    if traffic.total_traffic == 0:
        return BALANCED
    return departure_ratio_scale(traffic.departures / traffic.total_traffic)


def departure_color(ratio: float) -> str:
    """Mix the departures and arrivals colours by the ratio bucket."""
    rgb = [
        round(d * ratio + a * (1 - ratio))
        for d, a in zip(DEPARTURES_COLOR, ARRIVALS_COLOR)
    ]
    return "#{:02x}{:02x}{:02x}".format(*rgb)
