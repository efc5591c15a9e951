"""Layout output data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from kubegraph.errors import DegradedLayoutCycle
from kubegraph.models.resources import Edge, Node


class Direction(StrEnum):
    """Flow direction of the rank axis."""

    LEFT_TO_RIGHT = "LR"
    TOP_TO_BOTTOM = "TB"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class LayoutOptions:
    """Layout parameters. Defaults mirror the dashboard's card geometry."""

    direction: Direction = Direction.LEFT_TO_RIGHT
    node_width: float = 260.0
    node_height: float = 90.0
    node_sep: float = 40.0  # gap between neighbours inside a rank
    rank_sep: float = 80.0  # gap between consecutive ranks
    margin: float = 100.0

    @property
    def node_size(self) -> Size:
        return Size(self.node_width, self.node_height)


@dataclass(frozen=True)
class LayoutNode:
    """A node with its computed top-left position."""

    node: Node
    position: Point
    size: Size
    rank: int
    order: int

    @property
    def id(self) -> str:
        return self.node.id


@dataclass(frozen=True)
class EdgeHints:
    """Rendering hints derived from an edge's style."""

    curve: str = "smoothstep"
    marker: str = "arrowclosed"
    stroke: str = "#94a3b8"
    stroke_width: float = 2.0
    dash_array: str | None = None
    corner_radius: float = 5.0


@dataclass(frozen=True)
class LayoutEdge:
    """An edge with rendering hints and its orthogonal route."""

    edge: Edge
    hints: EdgeHints
    points: tuple[Point, ...] = ()

    @property
    def id(self) -> str:
        return self.edge.id


@dataclass(frozen=True)
class LayoutResult:
    """Positions for every node and edge plus the enclosing box.

    Nodes and edges keep the input order of the GraphModel they came from.
    ``degraded`` is set when back-edges had to be ignored for ranking.
    """

    nodes: tuple[LayoutNode, ...] = ()
    edges: tuple[LayoutEdge, ...] = ()
    bounding_box: Size = field(default_factory=lambda: Size(0.0, 0.0))
    direction: Direction = Direction.LEFT_TO_RIGHT
    degraded: DegradedLayoutCycle | None = None

    def node(self, node_id: str) -> LayoutNode:
        for layout_node in self.nodes:
            if layout_node.id == node_id:
                return layout_node
        raise KeyError(node_id)

    @property
    def ranks(self) -> dict[str, int]:
        return {n.id: n.rank for n in self.nodes}
