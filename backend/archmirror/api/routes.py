import json
import logging

from fastapi import APIRouter, HTTPException, Response

from archmirror import config
from archmirror.api.serializers import (
    EXPORT_FILENAME,
    graph_from_dict,
    graph_to_dict,
)
from archmirror.graph.types import NodeNotFoundError
from archmirror.interaction.drag import move_node, pick_node
from archmirror.layout.config import LayoutConfig
from archmirror.pipeline import generate_map
from archmirror.renderer.svg_renderer import render_svg
from archmirror.schemas import (
    GenerateRequest,
    GenerateResponse,
    GraphModel,
    MoveNodeRequest,
    PickRequest,
    PickResponse,
    RenderRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _canvas(width, height):
    return (
        width if width is not None else config.CANVAS_WIDTH,
        height if height is not None else config.CANVAS_HEIGHT,
    )


def _graph_from_model(model: GraphModel):
    return graph_from_dict(model.model_dump(by_alias=True))


@router.get("/health")
def health():
    return {"status": "healthy", "version": config.APP_VERSION}


@router.post("/generate", response_model=GenerateResponse)
def generate(request: GenerateRequest):
    width, height = _canvas(request.width, request.height)
    graph = generate_map(request.text, width, height, LayoutConfig.from_env())

    logger.info(
        "Generated map: %d nodes, %d edges on %gx%g",
        len(graph.nodes),
        len(graph.edges),
        width,
        height,
    )

    return {
        "width": width,
        "height": height,
        "graph": graph_to_dict(graph),
    }


@router.post("/render/svg")
def render(request: RenderRequest):
    width, height = _canvas(request.width, request.height)
    graph = _graph_from_model(request.graph)
    svg = render_svg(graph, width, height)

    logger.info(
        "Rendered SVG: %d nodes, %d edges on %gx%g",
        len(graph.nodes),
        len(graph.edges),
        width,
        height,
    )
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/pick", response_model=PickResponse)
def pick(request: PickRequest):
    graph = _graph_from_model(request.graph)
    node_id = pick_node(graph, request.x, request.y)

    logger.info("Pick at (%g, %g): %s", request.x, request.y, node_id)
    return {"node_id": node_id}


@router.post("/nodes/move")
def move(request: MoveNodeRequest):
    graph = _graph_from_model(request.graph)
    try:
        move_node(graph, request.node_id, request.x, request.y)
    except NodeNotFoundError:
        logger.info("Move rejected, unknown node: %s", request.node_id)
        raise HTTPException(
            status_code=404,
            detail=f"Node not found: {request.node_id}",
        )

    logger.info("Moved %s to (%g, %g)", request.node_id, request.x, request.y)
    return graph_to_dict(graph)


@router.post("/export/json")
def export_json(request: GenerateRequest):
    width, height = _canvas(request.width, request.height)
    graph = generate_map(request.text, width, height, LayoutConfig.from_env())

    logger.info("Exporting map with %d nodes", len(graph.nodes))

    return Response(
        content=json.dumps(graph_to_dict(graph), indent=2),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"',
        },
    )
