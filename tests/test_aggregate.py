"""Tests for per-station traffic aggregation."""

import unittest

from stationtraffic.traffic.aggregate import StationTraffic, compute_station_traffic
from stationtraffic.traffic.filter import ANY_TIME, filter_trips_by_time

from helpers import make_stations, make_trips


class TestComputeStationTraffic(unittest.TestCase):

    def setUp(self):
        self.stations = make_stations("A", "B", "C")
        self.trips = make_trips(
            ("A", "B", "2024-03-01 08:05", "2024-03-01 08:20"),
            ("A", "C", "2024-03-01 09:00", "2024-03-01 09:15"),
            ("B", "A", "2024-03-01 17:30", "2024-03-01 17:45"),
            ("X", "A", "2024-03-01 18:00", "2024-03-01 18:10"),
            ("A", "Y", "2024-03-01 18:00", "2024-03-01 18:10"),
        )

    def test_counts(self):
        metrics = compute_station_traffic(self.stations, self.trips)

        self.assertEqual(metrics["A"], StationTraffic("A", arrivals=2, departures=3))
        self.assertEqual(metrics["B"], StationTraffic("B", arrivals=1, departures=1))
        self.assertEqual(metrics["C"], StationTraffic("C", arrivals=1, departures=0))

    def test_total_is_sum(self):
        metrics = compute_station_traffic(self.stations, self.trips)
        for t in metrics.values():
            self.assertEqual(t.total_traffic, t.arrivals + t.departures)

    def test_unknown_codes_are_dropped(self):
        metrics = compute_station_traffic(self.stations, self.trips)
        self.assertEqual(set(metrics), {"A", "B", "C"})

        known = {"A", "B", "C"}
        deps = sum(t.departures for t in metrics.values())
        arrs = sum(t.arrivals for t in metrics.values())
        self.assertEqual(deps, int(self.trips["start_station_id"].isin(known).sum()))
        self.assertEqual(arrs, int(self.trips["end_station_id"].isin(known).sum()))

    def test_empty_trip_set_gives_zeros(self):
        metrics = compute_station_traffic(self.stations, make_trips())
        for t in metrics.values():
            self.assertEqual((t.arrivals, t.departures, t.total_traffic), (0, 0, 0))

    def test_repeated_calls_do_not_accumulate(self):
        compute_station_traffic(self.stations, self.trips)
        subset = filter_trips_by_time(self.trips, 440)
        metrics = compute_station_traffic(self.stations, subset)

        self.assertEqual(metrics["A"].departures, 1)
        self.assertEqual(metrics["B"].arrivals, 1)
        self.assertEqual(metrics["C"].total_traffic, 0)

        again = compute_station_traffic(self.stations, self.trips)
        self.assertEqual(again, compute_station_traffic(self.stations, self.trips))

    def test_filtering_never_increases_traffic(self):
        full = compute_station_traffic(self.stations, self.trips)
        for w in (ANY_TIME, 0, 485, 540, 1050, 1080, 1439):
            part = compute_station_traffic(
                self.stations, filter_trips_by_time(self.trips, w)
            )
            for code in full:
                self.assertLessEqual(part[code].total_traffic, full[code].total_traffic)

    def test_records_are_immutable(self):
        metrics = compute_station_traffic(self.stations, self.trips)
        with self.assertRaises(AttributeError):
            metrics["A"].arrivals = 99


if __name__ == "__main__":
    unittest.main()
