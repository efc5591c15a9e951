"""Core data structures for kubegraph."""

from kubegraph.models.config import KubeGraphConfig
from kubegraph.models.layout import (
    Direction,
    EdgeHints,
    LayoutEdge,
    LayoutNode,
    LayoutOptions,
    LayoutResult,
    Point,
    Size,
)
from kubegraph.models.resources import (
    Edge,
    EdgeStyle,
    HealthStatus,
    Node,
    NodeKind,
    SyncStatus,
)

__all__ = [
    "Direction",
    "Edge",
    "EdgeHints",
    "EdgeStyle",
    "HealthStatus",
    "KubeGraphConfig",
    "LayoutEdge",
    "LayoutNode",
    "LayoutOptions",
    "LayoutResult",
    "Node",
    "NodeKind",
    "Point",
    "Size",
    "SyncStatus",
]
