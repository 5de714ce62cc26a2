"Contains the Vertex and the Edge class of the road graph"

from typing import List, NamedTuple, Optional
from openlr import Coordinates
from shapely.geometry import Point


class Edge(NamedTuple):
    """An undirected road segment between two vertices

    `v1` and `v2` are interchangeable: the edge v1-v2 connects the same pair as v2-v1."""
    v1: int
    v2: int
    #: The raw speed attribute of the road, e.g. "25 mph". May be missing.
    max_speed: Optional[str] = None
    #: The name of the road this segment belongs to. May be missing.
    name: Optional[str] = None

    def other(self, vertex_id: int) -> int:
        "Returns the endpoint opposite to `vertex_id`"
        if vertex_id == self.v1:
            return self.v2
        if vertex_id == self.v2:
            return self.v1
        raise ValueError(f"Vertex {vertex_id} is no endpoint of {self}")

    def connects(self, vertex_a: int, vertex_b: int) -> bool:
        "Tells whether this edge connects both vertices, in any order"
        return {self.v1, self.v2} == {vertex_a, vertex_b}


class Vertex:
    "A routable point of the graph: a road intersection or a named location"

    __slots__ = ["vertex_id", "lon", "lat", "name", "edges"]

    def __init__(self, vertex_id: int, lon: float, lat: float):
        self.vertex_id = vertex_id
        self.lon = lon
        self.lat = lat
        self.name: Optional[str] = None
        self.edges: List[Edge] = []

    def __repr__(self):
        return f"Vertex with id={self.vertex_id} at ({self.lon}, {self.lat})"

    @property
    def coordinates(self) -> Coordinates:
        "Returns the lon, lat coordinates of this vertex"
        return Coordinates(self.lon, self.lat)

    @property
    def geometry(self) -> Point:
        "Returns the position of this vertex as shapely point"
        return Point(self.lon, self.lat)

    def add_edge(self, edge: Edge):
        self.edges.append(edge)
