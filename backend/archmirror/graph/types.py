from dataclasses import dataclass, field
from typing import Dict, List, Optional


class NodeNotFoundError(KeyError):
    """Raised when a collaborator asks for a node id the graph does not hold."""


@dataclass
class Node:
    id: str
    label: str
    kind: str  # ui | api | db | auth | queue | cache | ai | default
    x: float = 0.0
    y: float = 0.0


@dataclass
class Edge:
    source: str
    target: str
    label: str = ""


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    _index: Dict[str, Node] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._reindex()

    def _reindex(self):
        self._index = {node.id: node for node in self.nodes}

    def add_node(self, node: Node) -> Node:
        self.nodes.append(node)
        self._index[node.id] = node
        return node

    def node_index(self) -> Dict[str, Node]:
        """id -> node mapping, rebuilt if nodes were added to the list directly."""
        if len(self._index) != len(self.nodes):
            self._reindex()
        return self._index

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.node_index().get(node_id)

    def require_node(self, node_id: str) -> Node:
        node = self.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node
