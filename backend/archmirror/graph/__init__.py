from archmirror.graph.types import Node, Edge, Graph, NodeNotFoundError

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "NodeNotFoundError",
]
