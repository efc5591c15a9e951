"""Input schema for graph snapshots supplied as plain structured data.

A document looks like::

    {
      "nodes": [{"id": "app", "kind": "Application", "name": "online-store",
                 "health": "Healthy", "sync": "Synced"}, ...],
      "edges": [{"id": "e1", "source": "app", "target": "frontend-deploy"},
                {"id": "e19", "source": "ingress", "target": "frontend-svc",
                 "type": "dashed"}, ...]
    }

Any node key other than id/kind/name/health/sync is kept as a
kind-specific attribute.  Edge style may be given as ``style`` or ``type``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from kubegraph.graph.model import GraphModel
from kubegraph.models.resources import Edge, EdgeStyle, HealthStatus, Node, SyncStatus


class NodeRecord(BaseModel):
    """One resource record from the data source."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    kind: str = ""
    name: str = ""
    health: str | None = None
    sync: str | None = None

    def to_node(self) -> Node:
        return Node(
            id=self.id,
            kind_name=self.kind,
            name=self.name or self.id,
            health=HealthStatus.parse(self.health),
            sync=SyncStatus.parse(self.sync),
            attributes=dict(self.model_extra or {}),
        )


class EdgeRecord(BaseModel):
    """One relationship record from the data source."""

    id: str = Field(min_length=1)
    source: str
    target: str
    style: Literal["solid", "dashed"] = Field(
        default="solid",
        validation_alias=AliasChoices("style", "type"),
    )

    def to_edge(self) -> Edge:
        return Edge(id=self.id, source=self.source, target=self.target, style=EdgeStyle(self.style))


class GraphDocument(BaseModel):
    """A complete graph snapshot."""

    nodes: list[NodeRecord] = Field(default_factory=list)
    edges: list[EdgeRecord] = Field(default_factory=list)


def graph_from_document(doc: GraphDocument | dict[str, Any]) -> GraphModel:
    """Build a validated GraphModel from a document or a plain dict.

    Raises:
        pydantic.ValidationError: a record is malformed.
        GraphValidationError: the records do not form a consistent graph.
    """
    if not isinstance(doc, GraphDocument):
        doc = GraphDocument.model_validate(doc)
    return GraphModel(
        nodes=[record.to_node() for record in doc.nodes],
        edges=[record.to_edge() for record in doc.edges],
    )


def load_graph_file(path: str | Path) -> GraphModel:
    """Read a JSON graph document from disk."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return graph_from_document(raw)
