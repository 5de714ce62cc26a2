"Contains a test case for the haversine functions"

import unittest
from math import pi

import numpy as np
from geographiclib.geodesic import Geodesic
from openlr import Coordinates
from shapely.geometry import LineString

from routefinder.maps.haversine import (
    distance, distances, bearing, pairwise, path_length, path_geometry, EARTH_RADIUS
)

from .example_graph import setup_testgraph

METERS_PER_MILE = 1609.344


class HaversineTests(unittest.TestCase):
    "Unit tests for the spherical distance and bearing functions"

    def test_distance_one_degree_latitude(self):
        "One degree along a meridian is a 360th of the circumference"
        dist = distance(Coordinates(0.0, 0.0), Coordinates(0.0, 1.0))
        self.assertAlmostEqual(dist, 2 * pi * EARTH_RADIUS / 360, places=9)

    def test_distance_same_point(self):
        "A point has no distance to itself"
        geo = Coordinates(13.41, 52.525)
        self.assertEqual(distance(geo, geo), 0.0)

    def test_distance_long(self):
        "Compare a distance to the ellipsoidal geodesic, allowing for the spherical model"
        geo1 = Coordinates(4.9091286, 52.3773181)
        geo2 = Coordinates(13.4622487, 52.4952885)
        geodesic = Geodesic.WGS84.Inverse(geo1.lat, geo1.lon, geo2.lat, geo2.lon)["s12"]
        self.assertAlmostEqual(distance(geo1, geo2), geodesic / METERS_PER_MILE, delta=3.0)

    def test_distance_short(self):
        "Compare a short distance to the ellipsoidal geodesic"
        geo1 = Coordinates(13.1759576, 52.4218989)
        geo2 = Coordinates(13.147999, 52.4515114)
        geodesic = Geodesic.WGS84.Inverse(geo1.lat, geo1.lon, geo2.lat, geo2.lon)["s12"]
        self.assertAlmostEqual(distance(geo1, geo2), geodesic / METERS_PER_MILE, delta=0.02)

    def test_distance_symmetric(self):
        "Distances do not depend on the direction"
        graph = setup_testgraph()
        for v in graph.vertices():
            for w in graph.vertices():
                self.assertAlmostEqual(graph.distance(v, w), graph.distance(w, v), delta=1e-9)

    def test_distances_vectorised(self):
        "The array version agrees with the scalar one"
        origin = Coordinates(13.41, 52.525)
        lons = np.array([13.41, 13.425, -0.0000886])
        lats = np.array([52.525, 52.53, 51.462934])
        result = distances(origin, lons, lats)
        for (lon, lat, dist) in zip(lons, lats, result):
            self.assertAlmostEqual(dist, distance(origin, Coordinates(lon, lat)), places=9)

    def test_bearing_zero(self):
        "Test bearing function where it should be zero"
        bear = bearing(Coordinates(0.0, 10.0), Coordinates(0.0, 20.0))
        self.assertEqual(bear, 0.0)

    def test_bearing_180(self):
        "Test bearing function where it should be 180°"
        bear = bearing(Coordinates(0.0, -10.0), Coordinates(0.0, -20.0))
        self.assertAlmostEqual(bear, 180.0)

    def test_bearing_90_1(self):
        "Test bearing function where it should be 90°"
        bear = bearing(Coordinates(1.0, 0.0), Coordinates(2.0, 0.0))
        self.assertAlmostEqual(bear, 90.0)

    def test_bearing_90_2(self):
        "Bearings to the west are negative"
        bear = bearing(Coordinates(-1.0, 0.0), Coordinates(-2.0, 0.0))
        self.assertAlmostEqual(bear, -90.0)

    def test_pairwise(self):
        "Consecutive pairs of a sequence"
        self.assertListEqual(list(pairwise([1, 2, 3])), [(1, 2), (2, 3)])
        self.assertListEqual(list(pairwise([1])), [])

    def test_path_length(self):
        "The length of a path sums up its segments"
        graph = setup_testgraph()
        expected = graph.distance(0, 2) + graph.distance(2, 4)
        self.assertAlmostEqual(path_length(graph, [0, 2, 4]), expected)
        self.assertEqual(path_length(graph, [0]), 0.0)

    def test_path_geometry(self):
        "The shape of a path is a linestring through its vertices"
        graph = setup_testgraph()
        shape = path_geometry(graph, [0, 2, 4])
        self.assertIsInstance(shape, LineString)
        self.assertListEqual(list(shape.coords), [(13.41, 52.525), (13.414, 52.525), (13.416, 52.525)])
        self.assertIsNone(path_geometry(graph, [0]))


class HaversineExtremesTests(unittest.TestCase):
    "The formulas at antipodes, poles and the 180° meridian"

    half_circumference = pi * EARTH_RADIUS

    def test_distance_antipodes(self):
        "Antipodal points are half the circumference apart"
        for tenth_degrees in range(-900, 901, 5):
            lat = tenth_degrees / 10
            dist = distance(Coordinates(0.0, lat), Coordinates(180.0, -lat))
            self.assertAlmostEqual(dist, self.half_circumference, delta=1e-3)

    def test_distances_antipodes(self):
        "The array version stays finite for antipodal points"
        lats = np.arange(-90.0, 90.5, 0.5)
        lons = np.full(lats.shape, 180.0)
        for lat in [-12.0, -2.5, 5.5, 87.5]:
            result = distances(Coordinates(0.0, lat), lons, -lats)
            self.assertTrue(np.all(np.isfinite(result)))
            self.assertTrue(np.all(result <= self.half_circumference + 1e-6))

    def test_distance_poles(self):
        "Pole to pole is half the circumference, and longitude is irrelevant at a pole"
        self.assertAlmostEqual(
            distance(Coordinates(0.0, 90.0), Coordinates(0.0, -90.0)), self.half_circumference
        )
        self.assertAlmostEqual(distance(Coordinates(0.0, 90.0), Coordinates(120.0, 90.0)), 0.0)

    def test_distance_across_180(self):
        "Crossing the 180° meridian takes the short way"
        dist = distance(Coordinates(179.5, 0.0), Coordinates(-179.5, 0.0))
        self.assertAlmostEqual(dist, 2 * pi * EARTH_RADIUS / 360, places=9)
        result = distances(Coordinates(179.5, 0.0), np.array([-179.5]), np.array([0.0]))
        self.assertAlmostEqual(result[0], dist, places=9)

    def test_bearing_across_180(self):
        "Going east over the 180° meridian has a bearing of 90°"
        self.assertAlmostEqual(bearing(Coordinates(179.5, 0.0), Coordinates(-179.5, 0.0)), 90.0)
        self.assertAlmostEqual(bearing(Coordinates(-179.5, 0.0), Coordinates(179.5, 0.0)), -90.0)

    def test_bearing_from_pole(self):
        "From the north pole every direction is south"
        self.assertAlmostEqual(abs(bearing(Coordinates(0.0, 90.0), Coordinates(0.0, 0.0))), 180.0)
        self.assertAlmostEqual(bearing(Coordinates(0.0, -90.0), Coordinates(0.0, 0.0)), 0.0)
