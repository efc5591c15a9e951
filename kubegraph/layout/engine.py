"""Layered layout engine.

Runs ranking -> ordering -> coordinates over a GraphModel and memoizes the
result per graph snapshot.  A snapshot is identified by object identity:
GraphModel is immutable, so the same object always lays out the same way.
"""

from __future__ import annotations

import time

from kubegraph.errors import DegradedLayoutCycle
from kubegraph.graph.model import GraphModel
from kubegraph.layout.coordinates import assign_coordinates, bounding_box
from kubegraph.layout.edges import edge_hints, smooth_step_route
from kubegraph.layout.ordering import order_layers
from kubegraph.layout.ranking import assign_ranks
from kubegraph.models.layout import LayoutEdge, LayoutNode, LayoutOptions, LayoutResult
from kubegraph.observability.logging import get_logger
from kubegraph.observability.metrics import (
    layout_degraded_total,
    layout_duration_seconds,
    layout_total,
)

_log = get_logger("layout.engine")


def compute_layout(graph: GraphModel, options: LayoutOptions | None = None) -> LayoutResult:
    """Lay out *graph* without caching.

    An empty graph gives an empty result with a 0x0 bounding box.  Cycles
    never fail the layout: the ignored back-edges are attached as
    ``result.degraded``.
    """
    options = options or LayoutOptions()
    if len(graph) == 0:
        return LayoutResult(direction=options.direction)

    ranking = assign_ranks(graph)
    degraded: DegradedLayoutCycle | None = None
    if ranking.back_edges:
        degraded = DegradedLayoutCycle(edge_ids=ranking.back_edges)
        layout_degraded_total.inc()
        _log.warning(
            "layout_cycle_detected",
            back_edges=list(ranking.back_edges),
            nodes=len(graph),
        )

    layers = order_layers(graph, ranking)
    positions = assign_coordinates(layers, options)
    size = options.node_size

    order: dict[str, int] = {}
    for layer in layers:
        for i, node_id in enumerate(layer):
            order[node_id] = i

    layout_nodes = {
        node.id: LayoutNode(
            node=node,
            position=positions[node.id],
            size=size,
            rank=ranking.ranks[node.id],
            order=order[node.id],
        )
        for node in graph.nodes
    }
    layout_edges = tuple(
        LayoutEdge(
            edge=edge,
            hints=edge_hints(edge.style),
            points=smooth_step_route(layout_nodes[edge.source], layout_nodes[edge.target], options.direction),
        )
        for edge in graph.edges
    )

    return LayoutResult(
        nodes=tuple(layout_nodes[node.id] for node in graph.nodes),
        edges=layout_edges,
        bounding_box=bounding_box(positions, size, options.margin),
        direction=options.direction,
        degraded=degraded,
    )


class LayoutEngine:
    """Memoizing front end for ``compute_layout``.

    Holds one cache entry: the last graph laid out.  Supplying a different
    GraphModel object replaces it.
    """

    def __init__(self, options: LayoutOptions | None = None) -> None:
        self._options = options or LayoutOptions()
        self._cached_graph: GraphModel | None = None
        self._cached_result: LayoutResult | None = None

    @property
    def options(self) -> LayoutOptions:
        return self._options

    def layout(self, graph: GraphModel) -> LayoutResult:
        """Return the layout for *graph*, reusing the cached one when possible."""
        if self._cached_result is not None and self._cached_graph is graph:
            layout_total.labels(cached="true").inc()
            return self._cached_result

        t_start = time.monotonic()
        result = compute_layout(graph, self._options)
        duration = time.monotonic() - t_start

        layout_total.labels(cached="false").inc()
        layout_duration_seconds.observe(duration)
        _log.info(
            "layout_computed",
            nodes=len(result.nodes),
            edges=len(result.edges),
            width=result.bounding_box.width,
            height=result.bounding_box.height,
            direction=self._options.direction.value,
            duration_ms=round(duration * 1000.0, 3),
        )

        self._cached_graph = graph
        self._cached_result = result
        return result

    def invalidate(self) -> None:
        """Drop the cached result."""
        self._cached_graph = None
        self._cached_result = None
