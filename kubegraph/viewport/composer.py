"""Scene composition and interaction event sinks.

ViewportComposer owns the current graph snapshot, the memoizing layout
engine and the selection.  Every event is handled synchronously: by the time
``node_clicked`` returns, subscribers have seen the change and ``details()``
reflects it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kubegraph.detail.resolver import NodeDetails, resolve_details
from kubegraph.graph.model import GraphModel
from kubegraph.layout.engine import LayoutEngine
from kubegraph.models.layout import Direction, LayoutOptions, LayoutResult, Point, Size
from kubegraph.models.resources import HealthStatus, NodeKind, SyncStatus
from kubegraph.observability.logging import get_logger
from kubegraph.observability.metrics import selection_rejected_total
from kubegraph.selection.state import SelectionChange, SelectionState
from kubegraph.viewport.theme import HEALTH_COLOR, SYNC_COLOR, kind_icon

_log = get_logger("viewport.composer")

SelectionListener = Callable[[SelectionChange], None]


@dataclass(frozen=True)
class SceneNode:
    id: str
    kind: NodeKind
    kind_name: str
    name: str
    position: Point
    size: Size
    icon: str
    health: HealthStatus
    health_color: str
    sync: SyncStatus
    sync_color: str
    badge: str | None
    selected: bool


@dataclass(frozen=True)
class SceneEdge:
    id: str
    source: str
    target: str
    curve: str
    marker: str
    stroke: str
    stroke_width: float
    dash_array: str | None
    corner_radius: float
    points: tuple[Point, ...]


@dataclass(frozen=True)
class Scene:
    """Renderable snapshot: cards, edges and the scroll container size."""

    nodes: tuple[SceneNode, ...]
    edges: tuple[SceneEdge, ...]
    container: Size
    direction: Direction
    selected_id: str | None = None
    warnings: tuple[str, ...] = ()


def compose_scene(layout: LayoutResult, selection: SelectionState) -> Scene:
    """Combine a layout with the current selection into a Scene."""
    nodes = tuple(
        SceneNode(
            id=ln.id,
            kind=ln.node.kind,
            kind_name=ln.node.kind_name,
            name=ln.node.name,
            position=ln.position,
            size=ln.size,
            icon=kind_icon(ln.node.kind),
            health=ln.node.health,
            health_color=HEALTH_COLOR[ln.node.health],
            sync=ln.node.sync,
            sync_color=SYNC_COLOR[ln.node.sync],
            badge=ln.node.badge,
            selected=ln.id == selection.selected_id,
        )
        for ln in layout.nodes
    )
    edges = tuple(
        SceneEdge(
            id=le.id,
            source=le.edge.source,
            target=le.edge.target,
            curve=le.hints.curve,
            marker=le.hints.marker,
            stroke=le.hints.stroke,
            stroke_width=le.hints.stroke_width,
            dash_array=le.hints.dash_array,
            corner_radius=le.hints.corner_radius,
            points=le.points,
        )
        for le in layout.edges
    )
    warnings = (layout.degraded.message,) if layout.degraded is not None else ()
    return Scene(
        nodes=nodes,
        edges=edges,
        container=layout.bounding_box,
        direction=layout.direction,
        selected_id=selection.selected_id,
        warnings=warnings,
    )


class ViewportComposer:
    """Single-writer holder of the displayed graph and its selection."""

    def __init__(self, graph: GraphModel, options: LayoutOptions | None = None) -> None:
        self._engine = LayoutEngine(options)
        self._graph = graph
        self._selection = SelectionState()
        self._listeners: list[SelectionListener] = []

    @property
    def graph(self) -> GraphModel:
        return self._graph

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def engine(self) -> LayoutEngine:
        return self._engine

    def subscribe(self, listener: SelectionListener) -> None:
        """Register *listener*; it is called synchronously after every change."""
        self._listeners.append(listener)

    def layout(self) -> LayoutResult:
        return self._engine.layout(self._graph)

    def scene(self) -> Scene:
        return compose_scene(self.layout(), self._selection)

    def load(self, graph: GraphModel) -> SelectionChange:
        """Install a new snapshot.  The selection always resets."""
        self._graph = graph
        _log.info("graph_loaded", nodes=len(graph), edges=len(graph.edges))
        return self._apply(self._selection.clear())

    def node_clicked(self, node_id: str) -> SelectionChange:
        change = self._selection.select(node_id, self._graph)
        if change.rejected is not None:
            selection_rejected_total.inc()
            _log.info("selection_rejected", node_id=node_id)
            return change
        return self._apply(change)

    def background_clicked(self) -> SelectionChange:
        return self._apply(self._selection.clear())

    def details(self) -> NodeDetails | None:
        """Detail panel content for the selected node, None when nothing is selected."""
        if self._selection.selected_id is None:
            return None
        return resolve_details(self._graph.node(self._selection.selected_id))

    def _apply(self, change: SelectionChange) -> SelectionChange:
        self._selection = change.state
        if change.changed:
            _log.debug(
                "selection_changed",
                previous=change.previous.selected_id,
                selected=change.state.selected_id,
            )
        for listener in self._listeners:
            listener(change)
        return change
