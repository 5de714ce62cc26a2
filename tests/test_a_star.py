"Contains a testcase for the maps.a_star module"

import unittest
from heapq import heappush, heappop

from routefinder.maps import shortest_path, path_length, PathNotFoundError, SearchLimitError
from routefinder.maps import UnknownVertexError
from routefinder import Graph

from .example_graph import setup_testgraph, CONNECTED


def dijkstra_length(graph: Graph, start: int, end: int) -> float:
    "Length of the shortest path, found without heuristic"
    queue = [(0.0, start)]
    done = set()
    while queue:
        (length, vertex) = heappop(queue)
        if vertex == end:
            return length
        if vertex in done:
            continue
        done.add(vertex)
        for neighbor in graph.adjacent(vertex):
            if neighbor not in done:
                heappush(queue, (length + graph.distance(vertex, neighbor), neighbor))
    return float("inf")


class AStarTests(unittest.TestCase):
    "Tests the A* module"

    def setUp(self):
        self.graph = setup_testgraph()

    def test_shortest_path_same_vertex(self):
        "Shortest path between a vertex and itself is the vertex"
        path = shortest_path(self.graph, 4, 4)
        self.assertSequenceEqual(path, [4])

    def test_shortest_path_oneline(self):
        "Shortest path where the path is one edge"
        path = shortest_path(self.graph, 0, 2)
        self.assertSequenceEqual(path, [0, 2])

    def test_shortest_path_straight(self):
        "Shortest path along a straight road"
        path = shortest_path(self.graph, 0, 11)
        self.assertSequenceEqual(path, [0, 2, 4, 7, 11])

    def test_shortest_path_backwards(self):
        "Edges can be travelled in both directions"
        path = shortest_path(self.graph, 9, 0)
        self.assertSequenceEqual(path, [9, 8, 7, 4, 2, 0])

    def test_shortest_path_optimal(self):
        "The path found is as short as the one of an exhaustive search, for all pairs"
        for start in CONNECTED:
            for end in CONNECTED:
                path = shortest_path(self.graph, start, end)
                self.assertEqual(path[0], start)
                self.assertEqual(path[-1], end)
                for (v, w) in zip(path, path[1:]):
                    self.assertIn(w, self.graph.adjacent(v))
                self.assertAlmostEqual(
                    path_length(self.graph, path), dijkstra_length(self.graph, start, end),
                    places=9
                )

    def test_shortest_path_disconnected(self):
        "Vertices in different components have no path"
        graph = Graph()
        for vertex_id in range(4):
            graph.add_vertex(vertex_id, float(vertex_id), 0.0)
        graph.add_edge(0, 1, None, "West Road")
        graph.add_edge(2, 3, None, "East Road")
        graph.finalize()
        with self.assertRaises(PathNotFoundError):
            shortest_path(graph, 0, 3)

    def test_shortest_path_maxlen(self):
        "Paths longer than maxlen are not found"
        length = path_length(self.graph, [0, 2, 4, 7, 11])
        self.assertSequenceEqual(
            shortest_path(self.graph, 0, 11, maxlen=length + 1e-6), [0, 2, 4, 7, 11]
        )
        with self.assertRaises(PathNotFoundError):
            shortest_path(self.graph, 0, 11, maxlen=length / 2)

    def test_shortest_path_expansion_limit(self):
        "The search gives up after the allowed number of expansions"
        with self.assertRaises(SearchLimitError):
            shortest_path(self.graph, 0, 13, max_expansions=2)
        path = shortest_path(self.graph, 0, 13, max_expansions=1000)
        self.assertEqual(path[-1], 13)

    def test_shortest_path_unknown_vertex(self):
        "Pruned vertices cannot be routed to"
        with self.assertRaises(UnknownVertexError):
            shortest_path(self.graph, 0, 14)
        with self.assertRaises(UnknownVertexError):
            shortest_path(self.graph, 14, 0)
