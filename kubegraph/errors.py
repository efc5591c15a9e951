"""Error taxonomy for kubegraph.

GraphValidationError  -- fatal; raised before any layout is attempted.
DegradedLayoutCycle   -- non-fatal; attached to a LayoutResult when
                         back-edges were ignored for ranking.
UnknownNodeSelected   -- non-fatal; returned when a selection is rejected.

Only GraphValidationError is raised.  The two degraded conditions are plain
records so callers can inspect them without try/except.
"""

from __future__ import annotations

from dataclasses import dataclass


class KubeGraphError(Exception):
    """Base class for kubegraph exceptions."""


class GraphValidationError(KubeGraphError):
    """Raised when a graph snapshot references ids it does not define."""

    def __init__(
        self,
        edge_ids: list[str] | tuple[str, ...] = (),
        duplicate_ids: list[str] | tuple[str, ...] = (),
    ) -> None:
        self.edge_ids = tuple(edge_ids)
        self.duplicate_ids = tuple(duplicate_ids)
        parts = []
        if self.edge_ids:
            parts.append(f"edges with dangling references: {', '.join(self.edge_ids)}")
        if self.duplicate_ids:
            parts.append(f"duplicate ids: {', '.join(self.duplicate_ids)}")
        super().__init__("Invalid graph: " + "; ".join(parts))


@dataclass(frozen=True)
class DegradedLayoutCycle:
    """Back-edges that were ignored while ranking a cyclic graph."""

    edge_ids: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Graph contains cycles; ignored {len(self.edge_ids)} back-edge(s) for ranking: {', '.join(self.edge_ids)}"


@dataclass(frozen=True)
class UnknownNodeSelected:
    """A selection request named a node that is not in the current graph."""

    node_id: str

    @property
    def message(self) -> str:
        return f"Node '{self.node_id}' is not part of the current graph"
