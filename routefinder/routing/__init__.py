"""The request side of the package: routes between coordinates, directions along
them and name searches.

All functions expect a finalized :py:class:`~routefinder.maps.Graph`."""

from logging import debug
from typing import List, Optional, Set
from openlr import Coordinates
from ..maps import Graph, GraphError, shortest_path, PathNotFoundError
from ..observer import RouteObserver
from ..search import LocationRecord
from .configuration import Config, DEFAULT_CONFIG, load_config, save_config
from .directions import route_directions, classify_turn, junction_angle
from .maneuver import Maneuver, Turn, parse_maneuver


def route(
    graph: Graph,
    start_lon: float,
    start_lat: float,
    dest_lon: float,
    dest_lat: float,
    observer: Optional[RouteObserver] = None,
    config: Config = DEFAULT_CONFIG,
) -> List[int]:
    """Finds the shortest path between the vertices closest to two positions

    Args:
        graph:
            The finalized graph to route on
        start_lon, start_lat:
            The start position in WGS84 degrees
        dest_lon, dest_lat:
            The destination position in WGS84 degrees
        observer:
            An observer that is told about the outcome
        config:
            Limits of the path search

    Returns:
        The vertex ids along the path, starting at the vertex closest to the start position.
        An empty list means no route is available.
    Raises:
        GraphError:
            If the graph is not finalized yet.
        EmptyGraphError:
            If the graph has no vertices.
    """
    if not graph.finalized:
        raise GraphError("Routing requires a finalized graph")
    start = graph.closest_vertex(start_lon, start_lat)
    end = graph.closest_vertex(dest_lon, dest_lat)
    debug(f"Snapped ({start_lon}, {start_lat}) to vertex {start}, ({dest_lon}, {dest_lat}) to {end}")
    try:
        path = shortest_path(
            graph, start, end, maxlen=config.max_distance, max_expansions=config.max_expansions
        )
    except PathNotFoundError as err:
        debug(f"No path found between vertices {start} and {end}: {err}")
        if observer is not None:
            observer.on_route_fail(start, end)
        return []
    debug(f"Found path of {len(path)} vertices")
    if observer is not None:
        observer.on_route_success(start, end, path)
    return path


def directions(
    graph: Graph,
    path: List[int],
    observer: Optional[RouteObserver] = None,
    config: Config = DEFAULT_CONFIG,
) -> List[Maneuver]:
    "Returns the turn-by-turn directions along a path returned by `route`"
    maneuvers = route_directions(graph, path, config)
    if observer is not None:
        observer.on_directions(path, maneuvers)
    return maneuvers


def nearby(graph: Graph, lon: float, lat: float, config: Config = DEFAULT_CONFIG) -> List[int]:
    "Returns the ids of all vertices within the configured search radius around a position"
    return [
        vertex.vertex_id
        for vertex in graph.find_vertices_close_to(Coordinates(lon, lat), config.search_radius)
    ]


def search_prefix(graph: Graph, prefix: str) -> Set[str]:
    "Returns the names of all locations in the graph starting with `prefix`"
    return graph.locations.prefix_lookup(prefix)


def search_locations(graph: Graph, name: str) -> List[LocationRecord]:
    "Returns all locations in the graph with the given name"
    return graph.locations.exact_lookup(name)
