"Translates a vertex path into turn-by-turn directions"

from logging import debug
from typing import List, Sequence
from ..maps import Graph
from .configuration import Config, DEFAULT_CONFIG
from .maneuver import Maneuver, Turn


def classify_turn(angle: float) -> Turn:
    """Returns the turn class for a bearing signal in degrees

    Positive angles turn right, negative angles turn left."""
    if abs(angle) <= 15:
        return Turn.STRAIGHT
    if 15 < angle <= 30:
        return Turn.SLIGHT_RIGHT
    if -30 <= angle < -15:
        return Turn.SLIGHT_LEFT
    if 30 < angle <= 100:
        return Turn.RIGHT
    if -100 <= angle < -30:
        return Turn.LEFT
    if angle > 100:
        return Turn.SHARP_RIGHT
    return Turn.SHARP_LEFT


def junction_angle(graph: Graph, before: int, junction: int, after: int) -> float:
    """The bearing signal at `junction`, coming from `before` and leaving to `after`

    This adds the bearings of the incoming and the outgoing segment."""
    # TODO: confirm whether turns should be classified by the bearing difference instead
    return graph.bearing(before, junction) + graph.bearing(junction, after)


def road_name(graph: Graph, v1: int, v2: int, config: Config = DEFAULT_CONFIG) -> str:
    "Returns the name of the road between two neighbouring vertices"
    name = graph.edge_between(v1, v2).name
    return name if name else config.unknown_road


def route_directions(graph: Graph, path: Sequence[int],
                     config: Config = DEFAULT_CONFIG) -> List[Maneuver]:
    """Creates the list of maneuvers describing a path

    Consecutive segments on the same road are joined into one maneuver. The first
    maneuver always starts the route.

    Args:
        graph:
            The graph the path was found in
        path:
            The vertex ids along the route, as returned by the path search
        config:
            Provides the name used for unnamed roads

    Returns:
        The maneuvers in driving order. An empty path, i.e. no route, yields no maneuvers.
        A path of a single vertex yields one maneuver of zero length.
    Raises:
        GraphError:
            If consecutive vertices of the path are not connected in the graph.
    """
    if not path:
        return []

    maneuvers = []
    turn = Turn.START
    road = config.unknown_road
    length = 0.0

    for index in range(len(path) - 1):
        v1, v2 = path[index], path[index + 1]
        segment_road = road_name(graph, v1, v2, config)
        segment_length = graph.distance(v1, v2)

        if index == 0 or segment_road == road:
            length += segment_length
        else:
            maneuvers.append(Maneuver(turn, road, length))
            angle = junction_angle(graph, path[index - 1], v1, v2)
            turn = classify_turn(angle)
            debug(f"Changing from {road} to {segment_road} at vertex {v1}, angle {angle}: {turn.name}")
            length = segment_length
        road = segment_road

    maneuvers.append(Maneuver(turn, road, length))
    return maneuvers
