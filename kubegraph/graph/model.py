"""Validated, immutable graph snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import networkx as nx

from kubegraph.errors import GraphValidationError
from kubegraph.models.resources import Edge, Node
from kubegraph.observability.logging import get_logger
from kubegraph.observability.metrics import graph_validation_errors_total

_log = get_logger("graph.model")


class GraphModel:
    """Read-only node/edge snapshot consumed by the layout pipeline.

    Construction validates the snapshot and freezes it: there is no mutation
    API.  Nodes and edges keep their input order, which the layout engine
    uses as its deterministic tie-break.

    Raises:
        GraphValidationError: an edge names an unknown source or target, or
            a node or edge id is used twice.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> None:
        self._nodes: tuple[Node, ...] = tuple(nodes)
        self._edges: tuple[Edge, ...] = tuple(edges)
        self._by_id: dict[str, Node] = {}
        self._index: dict[str, int] = {}

        duplicates: list[str] = []
        for i, node in enumerate(self._nodes):
            if node.id in self._by_id:
                duplicates.append(node.id)
                continue
            self._by_id[node.id] = node
            self._index[node.id] = i

        seen_edges: set[str] = set()
        dangling: list[str] = []
        for edge in self._edges:
            if edge.id in seen_edges:
                duplicates.append(edge.id)
            seen_edges.add(edge.id)
            if edge.source not in self._by_id or edge.target not in self._by_id:
                dangling.append(edge.id)

        if dangling or duplicates:
            graph_validation_errors_total.inc()
            _log.warning(
                "graph_validation_failed",
                dangling_edges=dangling,
                duplicate_ids=duplicates,
            )
            raise GraphValidationError(edge_ids=dangling, duplicate_ids=duplicates)

        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        digraph.add_nodes_from(node.id for node in self._nodes)
        for edge in self._edges:
            digraph.add_edge(edge.source, edge.target, key=edge.id)
        self._digraph = nx.freeze(digraph)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def node(self, node_id: str) -> Node:
        """O(1) lookup.  Raises KeyError for unknown ids."""
        return self._by_id[node_id]

    def get(self, node_id: str) -> Node | None:
        return self._by_id.get(node_id)

    def index_of(self, node_id: str) -> int:
        """Position of *node_id* in the input order."""
        return self._index[node_id]

    def out_edges(self, node_id: str) -> list[tuple[str, str]]:
        """(edge id, target id) pairs leaving *node_id*.

        Targets come in the order they were first reached from *node_id*, so
        traversals over them follow the input order of the edges.
        """
        return [(key, target) for _, target, key in self._digraph.out_edges(node_id, keys=True)]

    def successors(self, node_id: str) -> list[str]:
        return list(self._digraph.successors(node_id))

    def predecessors(self, node_id: str) -> list[str]:
        return list(self._digraph.predecessors(node_id))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"GraphModel(nodes={len(self._nodes)}, edges={len(self._edges)})"
