import math

import pytest

from archmirror.graph.types import Edge, Graph, Node
from archmirror.layout.config import LayoutConfig
from archmirror.layout.engine import apply_layout, circle_layout, relax_layout
from archmirror.parsing.extractor import extract

WIDTH = 900
HEIGHT = 560
CX = WIDTH / 2
CY = HEIGHT / 2
RADIUS = 0.35 * min(WIDTH, HEIGHT)


def _positions(graph):
    return [(n.x, n.y) for n in graph.nodes]


def test_empty_graph_is_a_no_op():
    graph = Graph()
    assert apply_layout(graph, WIDTH, HEIGHT) is graph
    assert graph.nodes == []


def test_circle_layout_starts_at_top_and_goes_clockwise():
    nodes = [Node(id=str(i), label=str(i), kind="default") for i in range(4)]
    circle_layout(nodes, WIDTH, HEIGHT)

    expected = [
        (CX, CY - RADIUS),
        (CX + RADIUS, CY),
        (CX, CY + RADIUS),
        (CX - RADIUS, CY),
    ]
    for node, (x, y) in zip(nodes, expected):
        assert node.x == pytest.approx(x)
        assert node.y == pytest.approx(y)


def test_single_node_only_drifts_toward_center():
    graph = apply_layout(extract("queue"), WIDTH, HEIGHT)
    node = graph.nodes[0]

    assert node.x == pytest.approx(CX)
    assert node.y == pytest.approx(CY - RADIUS * 0.999 ** 80)


def test_zero_iterations_keeps_circle_placement():
    graph = extract("queue")
    apply_layout(graph, WIDTH, HEIGHT, LayoutConfig(iterations=0))

    assert graph.nodes[0].x == pytest.approx(CX)
    assert graph.nodes[0].y == pytest.approx(CY - RADIUS)


def test_connected_pair_is_pulled_toward_target_length():
    graph = apply_layout(extract("a -> b"), WIDTH, HEIGHT)
    a, b = graph.nodes
    d = math.hypot(b.x - a.x, b.y - a.y)

    assert d < 2 * RADIUS
    assert abs(d - 140) < 20


def test_short_edge_is_pushed_apart():
    a = Node(id="a", label="A", kind="default", x=440, y=280)
    b = Node(id="b", label="B", kind="default", x=460, y=280)
    relax_layout([a, b], [Edge("a", "b")], WIDTH, HEIGHT, LayoutConfig(iterations=1, centering=0))

    # k = 0.02 * (20 - 140) = -2.4
    assert a.x == pytest.approx(437.6)
    assert b.x == pytest.approx(462.4)
    assert a.y == b.y == 280


def test_disconnected_node_is_untouched_by_springs():
    graph = extract("a -> b\nc")
    circle_layout(graph.nodes, WIDTH, HEIGHT)
    start = graph.get_node("c")
    sx, sy = start.x, start.y

    relax_layout(graph.nodes, graph.edges, WIDTH, HEIGHT)
    c = graph.get_node("c")

    scale = 0.999 ** 80
    assert c.x == pytest.approx(CX + (sx - CX) * scale)
    assert c.y == pytest.approx(CY + (sy - CY) * scale)


def test_layout_is_bit_for_bit_repeatable():
    text = (
        "frontend ui connects to api gateway\n"
        "api gateway -> auth service, database, cache\n"
        "auth service talks to database\n"
        "queue publishes to api gateway\n"
        "ai inference service -> api gateway\n"
        "database stores user data"
    )
    first = apply_layout(extract(text), WIDTH, HEIGHT)
    second = apply_layout(extract(text), WIDTH, HEIGHT)

    assert _positions(first) == _positions(second)


def test_layout_does_not_change_topology():
    graph = extract("a -> b, c\nb -> c")
    ids = [n.id for n in graph.nodes]
    edges = list(graph.edges)

    apply_layout(graph, WIDTH, HEIGHT)

    assert [n.id for n in graph.nodes] == ids
    assert graph.edges == edges


def test_edges_to_unknown_nodes_are_ignored():
    graph = Graph(
        nodes=[Node(id="a", label="A", kind="default")],
        edges=[Edge("a", "ghost")],
    )
    apply_layout(graph, WIDTH, HEIGHT)
    assert graph.nodes[0].x == pytest.approx(CX)


def test_layout_config_from_env(monkeypatch):
    monkeypatch.setenv("LAYOUT_ITERATIONS", "5")
    monkeypatch.setenv("LAYOUT_TARGET_LENGTH", "200")

    config = LayoutConfig.from_env()

    assert config.iterations == 5
    assert config.target_length == 200
    assert config.radius_factor == 0.35
