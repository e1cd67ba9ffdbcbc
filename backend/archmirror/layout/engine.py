"""
Deterministic spring layout.

Phase 1 spreads nodes evenly on a circle (first node at the top).
Phase 2 runs a fixed number of relaxation passes that nudge every edge
toward the target length, then drift all nodes weakly toward the canvas
center. No randomness: identical graphs and canvas sizes produce
identical coordinates.
"""

import logging
import math
from typing import List, Optional

from archmirror.graph.types import Node, Edge, Graph
from archmirror.layout.config import LayoutConfig, DEFAULT_LAYOUT

logger = logging.getLogger(__name__)


def circle_layout(
    nodes: List[Node],
    width: float,
    height: float,
    config: LayoutConfig = DEFAULT_LAYOUT,
):
    if not nodes:
        return

    cx = width / 2
    cy = height / 2
    r = min(width, height) * config.radius_factor
    n = len(nodes)

    for i, node in enumerate(nodes):
        a = 2 * math.pi * i / n - math.pi / 2
        node.x = cx + r * math.cos(a)
        node.y = cy + r * math.sin(a)


def relax_layout(
    nodes: List[Node],
    edges: List[Edge],
    width: float,
    height: float,
    config: LayoutConfig = DEFAULT_LAYOUT,
):
    index = {node.id: node for node in nodes}
    cx = width / 2
    cy = height / 2

    for _ in range(config.iterations):
        for edge in edges:
            a = index.get(edge.source)
            b = index.get(edge.target)
            if a is None or b is None:
                continue

            dx = b.x - a.x
            dy = b.y - a.y
            d = math.hypot(dx, dy) or 1.0

            k = config.spring * (d - config.target_length)
            nx = dx / d * k
            ny = dy / d * k

            # updates are visible to the next edge in the same pass
            a.x += nx
            a.y += ny
            b.x -= nx
            b.y -= ny

        for node in nodes:
            node.x += (cx - node.x) * config.centering
            node.y += (cy - node.y) * config.centering


def apply_layout(
    graph: Graph,
    width: float,
    height: float,
    config: Optional[LayoutConfig] = None,
) -> Graph:
    """Position every node in place. Returns the same graph for chaining."""
    config = config or DEFAULT_LAYOUT

    circle_layout(graph.nodes, width, height, config)
    relax_layout(graph.nodes, graph.edges, width, height, config)

    logger.debug(
        "Laid out %d nodes on %sx%s canvas (%d iterations)",
        len(graph.nodes),
        width,
        height,
        config.iterations,
    )
    return graph
