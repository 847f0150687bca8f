"""Tests for the time-of-day trip filter."""

import unittest

from stationtraffic.traffic.filter import (
    ANY_TIME,
    filter_trips_by_time,
    minutes_since_midnight,
    validate_time_filter,
)

from helpers import make_trips


class TestValidateTimeFilter(unittest.TestCase):

    def test_accepts_sentinel_and_bounds(self):
        self.assertEqual(validate_time_filter(-1), ANY_TIME)
        self.assertEqual(validate_time_filter(0), 0)
        self.assertEqual(validate_time_filter(1439), 1439)

    def test_rejects_out_of_range(self):
        for bad in (-2, 1440, 5000):
            with self.assertRaises(ValueError):
                validate_time_filter(bad)

    def test_rejects_non_numbers_as_value_error(self):
        for bad in (float("inf"), float("-inf"), float("nan"), None, "abc"):
            with self.assertRaises(ValueError):
                validate_time_filter(bad)

    def test_rejects_fractional_and_bool(self):
        with self.assertRaises(ValueError):
            validate_time_filter(600.5)
        with self.assertRaises(ValueError):
            validate_time_filter(True)


class TestFilterTripsByTime(unittest.TestCase):

    def setUp(self):
        self.trips = make_trips(
            ("A", "B", "2024-03-01 08:05", "2024-03-01 08:20"),
            ("B", "A", "2024-03-02 12:00", "2024-03-02 12:30"),
            ("A", "A", "2024-03-03 23:50", "2024-03-03 23:59"),
        )

    def test_any_time_is_identity(self):
        self.assertIs(filter_trips_by_time(self.trips, ANY_TIME), self.trips)

    def test_window_matches_start_or_end(self):
        # 08:20 -> first trip (start 485, end 500)
        out = filter_trips_by_time(self.trips, 500)
        self.assertEqual(out["start_station_id"].tolist(), ["A"])

        # 13:30 is 90 from the start of trip 2 but 60 from its end
        out = filter_trips_by_time(self.trips, 810)
        self.assertEqual(out["start_station_id"].tolist(), ["B"])

    def test_window_edges_are_inclusive(self):
        out = filter_trips_by_time(self.trips, 485 + 60)
        self.assertIn("A", out["start_station_id"].tolist())
        out = filter_trips_by_time(self.trips, 500 + 61)
        self.assertNotIn(0, out.index.tolist())

    def test_date_is_ignored(self):
        trips = make_trips(
            ("A", "B", "2023-01-01 10:00", "2023-01-01 10:10"),
            ("A", "B", "2024-07-15 10:00", "2024-07-15 10:10"),
        )
        self.assertEqual(len(filter_trips_by_time(trips, 600)), 2)

    def test_no_wrap_at_midnight(self):
        # 23:50 vs 00:10 is 1420 minutes apart, not 20
        out = filter_trips_by_time(self.trips, 10)
        self.assertEqual(len(out), 0)

    def test_unparseable_timestamps_never_match(self):
        trips = make_trips(
            ("A", "B", "not a date", ""),
            ("A", "B", "2024-03-01 10:00", "garbage"),
        )
        self.assertTrue(trips["started_at"].isna().iloc[0])
        out = filter_trips_by_time(trips, 600)
        self.assertEqual(out.index.tolist(), [1])
        # still part of the unfiltered set
        self.assertEqual(len(filter_trips_by_time(trips, ANY_TIME)), 2)

    def test_input_not_mutated(self):
        before = self.trips.copy()
        filter_trips_by_time(self.trips, 500)
        self.assertTrue(before.equals(self.trips))

    def test_minutes_since_midnight(self):
        minutes = minutes_since_midnight(self.trips["started_at"])
        self.assertEqual(minutes.tolist(), [485, 720, 1430])


if __name__ == "__main__":
    unittest.main()
