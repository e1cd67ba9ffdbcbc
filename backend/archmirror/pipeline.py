from typing import Optional

from archmirror.graph.types import Graph
from archmirror.layout.config import LayoutConfig
from archmirror.layout.engine import apply_layout
from archmirror.parsing.extractor import extract


def generate_map(
    text: str,
    width: float,
    height: float,
    config: Optional[LayoutConfig] = None,
) -> Graph:
    graph = extract(text)
    return apply_layout(graph, width, height, config)
