"""
Provides the shortest_path(graph, start, end) -> List[int] function, which
finds a shortest path between two vertices.
"""
from typing import List, NamedTuple, Optional
from heapq import heappush, heappop
from logging import debug
from .tools import heuristic, PathNotFoundError, SearchLimitError


class Score(NamedTuple):
    """The score of a single item in the search priority queue"""
    f: float
    g: float


class SearchNode(NamedTuple):
    """A vertex reached by the search.

    Search nodes live in an arena list; `previous` is the arena index of the
    node this one was reached from."""
    vertex_id: int
    #: Distance travelled from the start, in miles
    distance_traveled: float
    #: Estimated remaining distance to the end, in miles
    estimate: float
    previous: Optional[int]


class PQItem(NamedTuple):
    """A single item in the search priority queue

    Items of equal score are ordered by arena index. Any order among them would do,
    as it does not change the cost of the resulting path."""
    score: Score
    index: int


def _reconstruct(arena: List[SearchNode], index: Optional[int]) -> List[int]:
    path = []
    while index is not None:
        node = arena[index]
        path.append(node.vertex_id)
        index = node.previous
    path.reverse()
    return path


def shortest_path(
        graph,
        start: int,
        end: int,
        maxlen: float = float("inf"),
        max_expansions: Optional[int] = None,
) -> List[int]:
    """
    Returns a shortest path through the graph between two vertices, as list of vertex ids.

    Uses the `A*`_ algorithm for this.

    .. _A*: https://en.wikipedia.org/wiki/A*_search_algorithm

    Args:
        graph:
            The finalized graph to search
        start:
            The vertex from which the path shall start
        end:
            The destination vertex of the path
        maxlen:
            Maximum allowed path length in miles.
            Paths whose estimated length exceeds it are not followed.
        max_expansions:
            Optional cap on the number of vertices taken from the queue.

    Returns:
        A shortest path, starting with `start` and ending with `end`.

        If start and end are the same vertex, the path consists of this single vertex.
    Raises:
        PathNotFoundError:
            Raised if no path between the vertices could be found.

            Even if a path exists, this may happen if all existing paths are longer than `maxlen`.
        SearchLimitError:
            Raised if `max_expansions` vertices were expanded without reaching `end`.
    """
    # Fail early on unknown vertices
    graph.get_vertex(end)

    arena = [SearchNode(start, 0.0, heuristic(graph, start, end), None)]
    open_set = [PQItem(Score(arena[0].estimate, 0.0), 0)]

    # The expanded vertices
    closed_set = set()

    while open_set:
        current = heappop(open_set)
        node = arena[current.index]

        # Stale entry of a vertex that was reached more cheaply before
        if node.vertex_id in closed_set:
            continue
        closed_set.add(node.vertex_id)

        # Check if the goal vertex has been reached
        if node.vertex_id == end:
            return _reconstruct(arena, current.index)

        if max_expansions is not None and len(closed_set) >= max_expansions:
            debug(f"Giving up after expanding {len(closed_set)} vertices")
            raise SearchLimitError(f"No path found within {max_expansions} expansions")

        # Add neighbors to the queue
        for neighbor in graph.adjacent(node.vertex_id):
            if neighbor in closed_set:
                continue

            g_score = node.distance_traveled + graph.distance(node.vertex_id, neighbor)
            estimate = heuristic(graph, neighbor, end)
            f_score = g_score + estimate

            if f_score > maxlen:
                continue

            arena.append(SearchNode(neighbor, g_score, estimate, current.index))
            heappush(open_set, PQItem(Score(f_score, g_score), len(arena) - 1))

    debug(f"Search space of {len(closed_set)} vertices exhausted")
    raise PathNotFoundError("No path found")
