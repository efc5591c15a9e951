"""Pydantic response and request models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error envelope returned by every non-2xx response."""

    error: str
    detail: str


class HealthResponse(BaseModel):
    status: str = "ok"
    nodes: int
    edges: int


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PointSchema(_FromAttributes):
    x: float
    y: float


class SizeSchema(_FromAttributes):
    width: float
    height: float


class SceneNodeSchema(_FromAttributes):
    id: str
    kind: str
    kind_name: str
    name: str
    position: PointSchema
    size: SizeSchema
    icon: str
    health: str
    health_color: str
    sync: str
    sync_color: str
    badge: str | None = None
    selected: bool = False


class SceneEdgeSchema(_FromAttributes):
    id: str
    source: str
    target: str
    curve: str
    marker: str
    stroke: str
    stroke_width: float
    dash_array: str | None = None
    corner_radius: float
    points: list[PointSchema]


class SceneResponse(_FromAttributes):
    """Everything a renderer needs to draw the graph."""

    nodes: list[SceneNodeSchema]
    edges: list[SceneEdgeSchema]
    container: SizeSchema
    direction: str
    selected_id: str | None = None
    warnings: list[str] = Field(default_factory=list)


class DetailFieldSchema(_FromAttributes):
    label: str
    value: str


class SyntheticPodSchema(_FromAttributes):
    name: str
    status: str
    ready: str
    host: str
    synthetic: bool = True


class DetailsResponse(_FromAttributes):
    node_id: str
    title: str
    summary: list[DetailFieldSchema]
    fields: list[DetailFieldSchema]
    pods: list[SyntheticPodSchema] = Field(default_factory=list)


class SelectRequest(BaseModel):
    node_id: str


class SelectionResponse(BaseModel):
    selected_id: str | None = None
    details: DetailsResponse | None = None
