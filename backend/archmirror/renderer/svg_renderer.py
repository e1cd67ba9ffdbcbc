import math
from typing import List
from xml.sax.saxutils import escape

from archmirror.graph.types import Graph
from archmirror.visual.visual_style import (
    NODE_STYLE,
    EDGE_STYLE,
    LABEL_STYLE,
    color_for,
)


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _render_edge(a, b) -> List[str]:
    dx = b.x - a.x
    dy = b.y - a.y
    d = math.hypot(dx, dy) or 1.0
    ux = dx / d
    uy = dy / d

    inset = EDGE_STYLE["inset"]
    x1 = a.x + ux * inset
    y1 = a.y + uy * inset
    x2 = b.x - ux * inset
    y2 = b.y - uy * inset

    ah = EDGE_STYLE["arrow_size"]
    head = [
        (x2, y2),
        (x2 - ux * ah - uy * ah, y2 - uy * ah + ux * ah),
        (x2 - ux * ah + uy * ah, y2 - uy * ah - ux * ah),
    ]
    points = " ".join(f"{_fmt(px)},{_fmt(py)}" for px, py in head)

    color = EDGE_STYLE["color"]
    return [
        f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
        f'stroke="{color}" stroke-width="{EDGE_STYLE["width"]}"/>',
        f'<polygon points="{points}" fill="{color}"/>',
    ]


def _render_node(node) -> List[str]:
    r = NODE_STYLE["radius"]
    s = LABEL_STYLE

    text_w = len(node.label) * s["char_width"]
    bg_w = max(text_w + s["pad_x"] * 2, s["min_width"])
    bg_h = s["height"]
    bg_x = node.x - bg_w / 2
    bg_y = node.y - r - s["gap"] - bg_h

    return [
        f'<circle cx="{_fmt(node.x)}" cy="{_fmt(node.y)}" r="{r}" '
        f'fill="{color_for(node.kind)}"/>',
        f'<rect x="{_fmt(bg_x)}" y="{_fmt(bg_y)}" '
        f'width="{_fmt(bg_w)}" height="{bg_h}" '
        f'rx="{s["corner"]}" ry="{s["corner"]}" fill="{s["background"]}"/>',
        f'<text x="{_fmt(node.x)}" y="{_fmt(bg_y + bg_h / 2)}" '
        f'text-anchor="middle" dominant-baseline="middle" '
        f'font-family="{s["font_family"]}" font-size="{s["font_size"]}" '
        f'fill="{s["color"]}">'
        f"{escape(node.label)}</text>",
    ]


def render_svg(graph: Graph, width: float, height: float) -> str:
    svg = [
        f'<svg width="{width:g}" height="{height:g}" '
        f'xmlns="http://www.w3.org/2000/svg">'
    ]

    # Draw edges first
    node_map = graph.node_index()

    for e in graph.edges:
        src = node_map.get(e.source)
        dst = node_map.get(e.target)
        if src is None or dst is None:
            continue
        svg.extend(_render_edge(src, dst))

    # Draw nodes
    for n in graph.nodes:
        svg.extend(_render_node(n))

    svg.append("</svg>")
    return "\n".join(svg)
