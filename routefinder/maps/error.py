class GraphError(Exception):
    "An error that happens through building or querying the road graph"


class IngestionOrderError(GraphError):
    "An edge references a vertex that was not registered before"


class UnknownVertexError(GraphError, KeyError):
    "A vertex id is not part of the graph, or was pruned by finalize()"


class EmptyGraphError(GraphError):
    "A nearest-vertex query was issued on a graph without vertices"
