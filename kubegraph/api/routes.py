"""REST routes for kubegraph.

Handlers are plain synchronous functions: every operation is CPU-bound and
finishes inside the request.  The composer lives in ``app.state`` and is the
single writer of the selection.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from kubegraph.api.schemas import (
    DetailsResponse,
    ErrorResponse,
    HealthResponse,
    SceneResponse,
    SelectionResponse,
    SelectRequest,
)
from kubegraph.detail.resolver import NodeDetails
from kubegraph.graph.schema import GraphDocument, graph_from_document
from kubegraph.layout.engine import compute_layout
from kubegraph.selection.state import SelectionState
from kubegraph.viewport.composer import ViewportComposer, compose_scene

router = APIRouter()


def _composer(request: Request) -> ViewportComposer:
    return request.app.state.composer  # type: ignore[no-any-return]


def _details(details: NodeDetails | None) -> DetailsResponse | None:
    return DetailsResponse.model_validate(details) if details is not None else None


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    graph = _composer(request).graph
    return HealthResponse(nodes=len(graph), edges=len(graph.edges))


@router.get("/scene", response_model=SceneResponse)
def scene(request: Request) -> SceneResponse:
    return SceneResponse.model_validate(_composer(request).scene())


@router.post("/layout", response_model=SceneResponse)
def layout(request: Request, document: GraphDocument) -> SceneResponse:
    """Lay out a posted document without replacing the served snapshot."""
    graph = graph_from_document(document)
    result = compute_layout(graph, _composer(request).engine.options)
    return SceneResponse.model_validate(compose_scene(result, SelectionState()))


@router.put("/graph", response_model=SceneResponse)
def replace_graph(request: Request, document: GraphDocument) -> SceneResponse:
    """Serve a new snapshot.  Clears the selection."""
    composer = _composer(request)
    composer.load(graph_from_document(document))
    return SceneResponse.model_validate(composer.scene())


@router.post("/select", response_model=SelectionResponse, responses={404: {"model": ErrorResponse}})
def select(request: Request, body: SelectRequest) -> SelectionResponse | JSONResponse:
    composer = _composer(request)
    change = composer.node_clicked(body.node_id)
    if change.rejected is not None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="UNKNOWN_NODE", detail=change.rejected.message).model_dump(),
        )
    return SelectionResponse(selected_id=change.state.selected_id, details=_details(composer.details()))


@router.post("/clear", response_model=SelectionResponse)
def clear(request: Request) -> SelectionResponse:
    _composer(request).background_clicked()
    return SelectionResponse()


@router.get("/details", response_model=DetailsResponse | None)
def details(request: Request) -> DetailsResponse | None:
    return _details(_composer(request).details())


@router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
