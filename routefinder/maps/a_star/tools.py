"Helper functions for A*"

from ..haversine import distance


class PathNotFoundError(Exception):
    "No path was found through the graph"


class SearchLimitError(PathNotFoundError):
    "The search gave up after expanding the allowed number of vertices"


def heuristic(graph, current: int, target: int) -> float:
    """Estimated cost from current to target.

    We use the great-circle distance here, which never overestimates the road distance."""
    return distance(graph.coordinates(current), graph.coordinates(target))
