import pytest

from archmirror.graph.types import Graph, Node, NodeNotFoundError
from archmirror.interaction.drag import DragSession, move_node, pick_node


def _graph():
    return Graph(
        nodes=[
            Node(id="a", label="A", kind="default", x=100, y=100),
            Node(id="b", label="B", kind="default", x=110, y=100),
            Node(id="c", label="C", kind="default", x=400, y=400),
        ]
    )


def test_pick_prefers_last_drawn_node():
    assert pick_node(_graph(), 105, 100) == "b"


def test_pick_hit_radius_is_inclusive():
    graph = _graph()
    assert pick_node(graph, 430, 400) == "c"
    assert pick_node(graph, 431, 400) is None


def test_pick_on_empty_graph():
    assert pick_node(Graph(), 0, 0) is None


def test_move_node_overwrites_position_only():
    graph = _graph()
    node = move_node(graph, "c", 1, 2)

    assert (node.x, node.y) == (1, 2)
    assert (graph.get_node("a").x, graph.get_node("a").y) == (100, 100)


def test_move_unknown_node_raises():
    with pytest.raises(NodeNotFoundError):
        move_node(_graph(), "ghost", 0, 0)
    with pytest.raises(KeyError):
        move_node(_graph(), "ghost", 0, 0)


def test_drag_session_keeps_grab_offset():
    graph = _graph()
    session = DragSession(graph)

    assert session.start(405, 395) == "c"
    assert session.active

    session.move(505, 495)
    c = graph.get_node("c")
    assert (c.x, c.y) == (500, 500)

    session.end()
    assert not session.active
    assert session.move(0, 0) is None
    assert (c.x, c.y) == (500, 500)


def test_drag_session_misses_leave_graph_unchanged():
    graph = _graph()
    session = DragSession(graph)

    assert session.start(800, 800) is None
    assert session.move(10, 10) is None
    assert [(n.x, n.y) for n in graph.nodes] == [(100, 100), (110, 100), (400, 400)]
