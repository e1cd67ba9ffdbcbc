import json

from archmirror.api.serializers import graph_from_dict, graph_to_dict
from archmirror.layout.engine import apply_layout
from archmirror.parsing.extractor import extract


def test_snapshot_shape():
    graph = apply_layout(extract("frontend ui connects to api gateway"), 900, 560)
    payload = graph_to_dict(graph)

    assert [n["id"] for n in payload["nodes"]] == ["frontend ui", "api gateway"]
    assert set(payload["nodes"][0]) == {"id", "label", "kind", "x", "y"}
    assert payload["nodes"][0]["label"] == "Frontend Ui"
    assert payload["edges"] == [
        {"from": "frontend ui", "to": "api gateway", "label": ""}
    ]
    json.dumps(payload)


def test_snapshot_rebuilds_equal_graph():
    graph = apply_layout(extract("api -> db, cache\nworker -> db"), 900, 560)
    assert graph_from_dict(graph_to_dict(graph)) == graph


def test_missing_optional_fields_get_defaults():
    graph = graph_from_dict({"nodes": [{"id": "api"}], "edges": []})
    node = graph.nodes[0]

    assert (node.label, node.kind, node.x, node.y) == ("api", "default", 0.0, 0.0)


def test_blank_label_falls_back_to_id():
    graph = graph_from_dict({"nodes": [{"id": "api", "label": None}], "edges": []})
    assert graph.nodes[0].label == "api"
