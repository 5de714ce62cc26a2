"""Contains the in-memory road `Graph`.

The graph model
---------------
Vertices
========
A vertex has an integer ID, assigned by whoever feeds the graph, and a WGS84
longitude/latitude position. Vertices representing named locations also carry
a display name.

Edges
=====
An edge connects two vertices without a direction. It carries the name of the
road it belongs to and an optional speed attribute. Both endpoints reference the
same edge object.

Building a graph
================
The ingestion step registers vertices, then connects them with `add_edge` or
`add_way`, and finally calls `finalize()` exactly once. Finalizing drops every
vertex without incident edges. Those are artifacts of the map data, e.g. shape
points or points of interest outside any road. Afterwards, the graph is not
modified any more and may be read concurrently without locking.

Named locations are indexed in `Graph.locations`, a :py:class:`~routefinder.search.Trie`.
The index is not pruned by `finalize()`, so named places stay searchable even
if their vertex is not routable.
"""

from logging import debug
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple
import numpy as np
from openlr import Coordinates
from ..search import Trie, LocationRecord
from . import haversine
from .error import GraphError, IngestionOrderError, UnknownVertexError, EmptyGraphError
from .primitives import Edge, Vertex


class Graph:
    """
    Graph of road intersections (vertices) and road segments (edges).

    Build one with:

        >>> graph = Graph()
        >>> graph.add_vertex(1, 13.41, 52.525)
        >>> graph.add_vertex(2, 13.414, 52.525)
        >>> graph.add_edge(1, 2, None, "Main St")
        >>> graph.finalize()
    """

    def __init__(self):
        self.vertex_map: Dict[int, Vertex] = {}
        self.locations = Trie()
        self.finalized = False
        # Coordinate arrays for the nearest vertex scan, built on demand
        self._scan_index: Optional[Tuple[List[int], np.ndarray, np.ndarray]] = None

    def __repr__(self):
        return f"Graph with {self.get_vertexcount()} vertices"

    # Building

    def add_vertex(self, vertex_id: int, lon: float, lat: float):
        """Registers a vertex.

        Re-adding an existing id replaces the vertex, including its edges. Neighbours
        still hold the edges to the replaced vertex until `finalize()` drops them."""
        self.vertex_map[vertex_id] = Vertex(vertex_id, lon, lat)
        self._scan_index = None

    def add_edge(self, v1: int, v2: int, max_speed: Optional[str] = None,
                 name: Optional[str] = None) -> Edge:
        """Connects two registered vertices

        Raises:
            IngestionOrderError:
                If one of the endpoints was not added before."""
        for vertex_id in (v1, v2):
            if vertex_id not in self.vertex_map:
                raise IngestionOrderError(
                    f"Edge {v1}-{v2} references vertex {vertex_id}, which was not added yet"
                )
        edge = Edge(v1, v2, max_speed, name)
        self.vertex_map[v1].add_edge(edge)
        if v2 != v1:
            self.vertex_map[v2].add_edge(edge)
        return edge

    def add_way(self, vertex_ids: Sequence[int], max_speed: Optional[str] = None,
                name: Optional[str] = None) -> List[Edge]:
        "Adds a road through the given vertices, as one edge per consecutive pair"
        return [
            self.add_edge(v1, v2, max_speed, name)
            for (v1, v2) in haversine.pairwise(vertex_ids)
        ]

    def add_location(self, vertex_id: int, name: str) -> LocationRecord:
        "Names a registered vertex and makes it findable through `locations`"
        vertex = self.get_vertex(vertex_id)
        vertex.name = name
        record = LocationRecord(vertex_id, vertex.lon, vertex.lat, name)
        self.locations.index(name, record)
        return record

    def _is_held_by_both(self, edge: Edge) -> bool:
        return all(
            vertex_id in self.vertex_map and edge in self.vertex_map[vertex_id].edges
            for vertex_id in (edge.v1, edge.v2)
        )

    def finalize(self):
        """Removes every vertex without any edge. Must be called once after building.

        Edges that one of their endpoints no longer holds, because that vertex was
        re-added, are dropped first.

        Raises:
            GraphError:
                If the graph was finalized already."""
        if self.finalized:
            raise GraphError("The graph is already finalized")
        for vertex in self.vertex_map.values():
            vertex.edges = [edge for edge in vertex.edges if self._is_held_by_both(edge)]
        isolated = [v for (v, vertex) in self.vertex_map.items() if not vertex.edges]
        for vertex_id in isolated:
            del self.vertex_map[vertex_id]
        self._scan_index = None
        self.finalized = True
        debug(f"Finalized graph, removed {len(isolated)} isolated vertices, "
              f"{len(self.vertex_map)} remain.")

    # Reading

    def get_vertex(self, vertex_id: int) -> Vertex:
        "Returns a vertex by its id"
        try:
            return self.vertex_map[vertex_id]
        except KeyError:
            raise UnknownVertexError(f"The vertex {vertex_id} does not exist") from None

    def get_vertices(self) -> Iterable[Vertex]:
        "Yields all vertices of the graph"
        yield from self.vertex_map.values()

    def get_vertexcount(self) -> int:
        "Returns the number of vertices in the graph"
        return len(self.vertex_map)

    def vertices(self) -> Iterable[int]:
        "Returns the ids of all vertices of the graph"
        return self.vertex_map.keys()

    def lon(self, vertex_id: int) -> float:
        return self.get_vertex(vertex_id).lon

    def lat(self, vertex_id: int) -> float:
        return self.get_vertex(vertex_id).lat

    def coordinates(self, vertex_id: int) -> Coordinates:
        return self.get_vertex(vertex_id).coordinates

    def edges(self, vertex_id: int) -> List[Edge]:
        "Returns the edges touching a vertex"
        return list(self.get_vertex(vertex_id).edges)

    def adjacent(self, vertex_id: int) -> Set[int]:
        "Returns the ids of all vertices sharing an edge with `vertex_id`"
        return {edge.other(vertex_id) for edge in self.get_vertex(vertex_id).edges}

    def edge_between(self, v1: int, v2: int) -> Edge:
        """Returns the first edge connecting both vertices

        Raises:
            GraphError:
                If the vertices are not neighbours."""
        for edge in self.get_vertex(v1).edges:
            if edge.connects(v1, v2):
                return edge
        raise GraphError(f"No edge connects the vertices {v1} and {v2}")

    def distance(self, v1: int, v2: int) -> float:
        "Returns the great-circle distance between two vertices in miles"
        return haversine.distance(self.coordinates(v1), self.coordinates(v2))

    def bearing(self, v1: int, v2: int) -> float:
        "Returns the initial bearing from `v1` to `v2` in degrees, between -180 and 180"
        return haversine.bearing(self.coordinates(v1), self.coordinates(v2))

    def _get_scan_index(self) -> Tuple[List[int], np.ndarray, np.ndarray]:
        if self._scan_index is None:
            ids = list(self.vertex_map.keys())
            lons = np.array([self.vertex_map[v].lon for v in ids], dtype=float)
            lats = np.array([self.vertex_map[v].lat for v in ids], dtype=float)
            self._scan_index = (ids, lons, lats)
        return self._scan_index

    def closest_vertex(self, lon: float, lat: float) -> int:
        """Returns the id of the vertex closest to the given position

        Of multiple equally close vertices, the first one in iteration order is returned.

        Raises:
            EmptyGraphError:
                If the graph has no vertices."""
        if not self.vertex_map:
            raise EmptyGraphError("Cannot find the closest vertex in an empty graph")
        ids, lons, lats = self._get_scan_index()
        dists = haversine.distances(Coordinates(lon, lat), lons, lats)
        return ids[int(np.argmin(dists))]

    def find_vertices_close_to(self, coord: Coordinates, dist: float) -> Iterable[Vertex]:
        """Yields all vertices within `dist` miles around `coord`

        No order specified here."""
        if not self.vertex_map:
            return
        ids, lons, lats = self._get_scan_index()
        dists = haversine.distances(coord, lons, lats)
        for index in np.flatnonzero(dists <= dist):
            yield self.vertex_map[ids[index]]

    # Location search

    def get_locations_by_prefix(self, prefix: str) -> List[str]:
        "Returns the sorted names of all locations starting with `prefix`"
        return sorted(self.locations.prefix_lookup(prefix))

    def get_locations(self, name: str) -> List[dict]:
        "Returns all locations with the given name, as dictionaries"
        return [record.to_dict() for record in self.locations.exact_lookup(name)]
