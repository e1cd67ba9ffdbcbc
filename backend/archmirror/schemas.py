from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeModel(BaseModel):
    id: str
    label: Optional[str] = None  # falls back to id
    kind: str = "default"  # ui | api | db | auth | queue | cache | ai | default
    x: float = Field(default=0.0, allow_inf_nan=False)
    y: float = Field(default=0.0, allow_inf_nan=False)


class EdgeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    label: str = ""


class GraphModel(BaseModel):
    nodes: List[NodeModel] = []
    edges: List[EdgeModel] = []


class GenerateRequest(BaseModel):
    text: str
    width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class GenerateResponse(BaseModel):
    width: float
    height: float
    graph: GraphModel


class RenderRequest(BaseModel):
    """Draw an existing snapshot (after drags) without re-running layout"""
    graph: GraphModel
    width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class PickRequest(BaseModel):
    graph: GraphModel
    x: float
    y: float


class PickResponse(BaseModel):
    node_id: Optional[str] = None


class MoveNodeRequest(BaseModel):
    graph: GraphModel
    node_id: str
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)
