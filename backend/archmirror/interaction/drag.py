"""
Pointer interaction over a laid-out graph.

Dragging only repositions a node; it never re-runs the layout engine.
"""

import math
from typing import Optional

from archmirror.graph.types import Graph, Node
from archmirror.visual.visual_style import NODE_STYLE


def pick_node(
    graph: Graph,
    x: float,
    y: float,
    hit_radius: float = NODE_STYLE["hit_radius"],
) -> Optional[str]:
    # Last drawn is on top, so scan back to front.
    for node in reversed(graph.nodes):
        if math.hypot(x - node.x, y - node.y) <= hit_radius:
            return node.id
    return None


def move_node(graph: Graph, node_id: str, x: float, y: float) -> Node:
    node = graph.require_node(node_id)
    node.x = x
    node.y = y
    return node


class DragSession:
    """
    Tracks one drag gesture: start on pointer down, move on pointer move,
    end on pointer up or leave.
    """

    def __init__(self, graph: Graph, hit_radius: float = NODE_STYLE["hit_radius"]):
        self.graph = graph
        self.hit_radius = hit_radius
        self.node_id: Optional[str] = None
        self.offset_x = 0.0
        self.offset_y = 0.0

    @property
    def active(self) -> bool:
        return self.node_id is not None

    def start(self, x: float, y: float) -> Optional[str]:
        node_id = pick_node(self.graph, x, y, self.hit_radius)
        if node_id is None:
            return None

        node = self.graph.require_node(node_id)
        self.node_id = node_id
        self.offset_x = x - node.x
        self.offset_y = y - node.y
        return node_id

    def move(self, x: float, y: float) -> Optional[Node]:
        if self.node_id is None:
            return None
        return move_node(
            self.graph,
            self.node_id,
            x - self.offset_x,
            y - self.offset_y,
        )

    def end(self):
        self.node_id = None
        self.offset_x = 0.0
        self.offset_y = 0.0
