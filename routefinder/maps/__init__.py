"""
This module describes the road graph and the searches on it.
"""

from .error import GraphError, IngestionOrderError, UnknownVertexError, EmptyGraphError
from .primitives import Vertex, Edge
from .graph import Graph
from .haversine import distance, bearing, path_length, path_geometry
from .a_star import shortest_path, PathNotFoundError, SearchLimitError
