"Some geo coordinates related tools, working on a spherical earth and in miles"
from math import radians, degrees, sin, cos, atan2, sqrt
from itertools import tee
from typing import Optional, Sequence
import numpy as np
from openlr import Coordinates
from shapely.geometry import LineString

#: Earth radius in miles. All distances of this package are in miles.
EARTH_RADIUS = 3963.0


def distance(point_a: Coordinates, point_b: Coordinates) -> float:
    """Returns the great-circle distance of two WGS84 coordinates, in miles

    Computed by the haversine formula, see https://www.movable-type.co.uk/scripts/latlong.html"""
    phi1 = radians(point_a.lat)
    phi2 = radians(point_b.lat)
    dphi = radians(point_b.lat - point_a.lat)
    dlambda = radians(point_b.lon - point_a.lon)

    a = min(1.0, sin(dphi / 2.0) ** 2 + cos(phi1) * cos(phi2) * sin(dlambda / 2.0) ** 2)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS * c


def distances(point: Coordinates, lons: np.ndarray, lats: np.ndarray) -> np.ndarray:
    "Vectorised `distance` from one point to many, in miles"
    phi1 = np.radians(point.lat)
    phi2 = np.radians(lats)
    dphi = np.radians(lats - point.lat)
    dlambda = np.radians(lons - point.lon)

    a = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlambda / 2.0) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS * c


def bearing(point_a: Coordinates, point_b: Coordinates) -> float:
    """Returns the initial bearing from `point_a` to `point_b` relative to true north

    The result is in degrees and is not normalized: it lies between -180 and 180."""
    phi1 = radians(point_a.lat)
    phi2 = radians(point_b.lat)
    dlambda = radians(point_b.lon - point_a.lon)

    y = sin(dlambda) * cos(phi2)
    x = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(dlambda)
    return degrees(atan2(y, x))


def pairwise(iterable):
    "s -> (s0,s1), (s1,s2), (s2, s3), ..."
    first, second = tee(iterable)
    next(second, None)
    return zip(first, second)


def path_length(graph, path: Sequence[int]) -> float:
    "Length of a vertex path through `graph`, in miles"
    return sum(graph.distance(v, w) for (v, w) in pairwise(path))


def path_geometry(graph, path: Sequence[int]) -> Optional[LineString]:
    "Returns the shape of a vertex path as linestring. None if it would be a Point"
    if len(path) < 2:
        return None
    return LineString([(graph.lon(v), graph.lat(v)) for v in path])
