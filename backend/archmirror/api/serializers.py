from typing import Any, Dict

from archmirror.graph.types import Node, Edge, Graph

EXPORT_FILENAME = "architects-mirror.json"


def node_to_dict(node: Node) -> Dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "kind": node.kind,
        "x": node.x,
        "y": node.y,
    }


def edge_to_dict(edge: Edge) -> Dict[str, Any]:
    return {
        "from": edge.source,
        "to": edge.target,
        "label": edge.label,
    }


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """
    Export snapshot: ordered nodes with final positions, ordered edges.
    Deterministic. JSON-compatible.
    """
    return {
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "edges": [edge_to_dict(e) for e in graph.edges],
    }


def graph_from_dict(payload: Dict[str, Any]) -> Graph:
    """Rebuild a Graph from a snapshot produced by graph_to_dict."""
    nodes = [
        Node(
            id=n["id"],
            label=n.get("label") or n["id"],
            kind=n.get("kind", "default"),
            x=float(n.get("x", 0.0)),
            y=float(n.get("y", 0.0)),
        )
        for n in payload.get("nodes", [])
    ]
    edges = [
        Edge(
            source=e["from"],
            target=e["to"],
            label=e.get("label", ""),
        )
        for e in payload.get("edges", [])
    ]
    return Graph(nodes=nodes, edges=edges)
