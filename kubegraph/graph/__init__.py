"""Resource graph snapshot and its input schema.

Provides the immutable GraphModel consumed by the layout pipeline and the
pydantic document schema used to build one from plain structured data.
"""

from kubegraph.graph.model import GraphModel
from kubegraph.graph.schema import (
    EdgeRecord,
    GraphDocument,
    NodeRecord,
    graph_from_document,
    load_graph_file,
)

__all__ = [
    "EdgeRecord",
    "GraphDocument",
    "GraphModel",
    "NodeRecord",
    "graph_from_document",
    "load_graph_file",
]
