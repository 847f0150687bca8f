"""Tests for viewport projection."""

import unittest

from stationtraffic.viz.projection import Viewport, project_station, project_stations

from helpers import make_stations


class TestViewport(unittest.TestCase):

    def test_center_maps_to_middle(self):
        vp = Viewport(center_lon=-71.09, center_lat=42.36, zoom=12, width=800, height=600)
        x, y = vp.project(-71.09, 42.36)
        self.assertAlmostEqual(x, 400)
        self.assertAlmostEqual(y, 300)

    def test_world_origin_at_zoom_zero(self):
        vp = Viewport(center_lon=0, center_lat=0, zoom=0, width=512, height=512)
        x, y = vp.project(-180, 0)
        self.assertAlmostEqual(x, 0)
        self.assertAlmostEqual(y, 256)
        x, y = vp.project(180, 0)
        self.assertAlmostEqual(x, 512)

    def test_east_is_right_north_is_up(self):
        vp = Viewport(center_lon=0, center_lat=0, zoom=3, width=100, height=100)
        x0, y0 = vp.project(0, 0)
        x1, y1 = vp.project(10, 10)
        self.assertGreater(x1, x0)
        self.assertLess(y1, y0)

    def test_zoom_doubles_offsets(self):
        a = Viewport(center_lon=0, center_lat=0, zoom=4, width=0, height=0)
        b = Viewport(center_lon=0, center_lat=0, zoom=5, width=0, height=0)
        self.assertAlmostEqual(b.project(5, 0)[0], 2 * a.project(5, 0)[0])

    def test_poles_are_clamped(self):
        vp = Viewport(center_lon=0, center_lat=0, zoom=1, width=0, height=0)
        self.assertEqual(vp.project(0, 90), vp.project(0, 89.9999))


class TestProjectStations(unittest.TestCase):

    def test_every_station_projected(self):
        stations = make_stations("A", "B", "C")
        vp = Viewport(center_lon=-71.08, center_lat=42.37, zoom=13, width=640, height=480)
        positions = project_stations(stations, vp)

        self.assertEqual(set(positions), {"A", "B", "C"})
        self.assertEqual(positions["B"], project_station(stations[1], vp))

    def test_pan_moves_markers(self):
        stations = make_stations("A")
        vp1 = Viewport(center_lon=-71.09, center_lat=42.36, zoom=12, width=640, height=480)
        vp2 = Viewport(center_lon=-71.00, center_lat=42.36, zoom=12, width=640, height=480)
        x1, _ = project_stations(stations, vp1)["A"]
        x2, _ = project_stations(stations, vp2)["A"]
        self.assertGreater(x1, x2)


if __name__ == "__main__":
    unittest.main()
