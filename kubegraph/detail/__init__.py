"""Detail resolution -- maps a selected node to its side-panel content."""

from kubegraph.detail.resolver import (
    DEFAULT_POD_COUNT,
    DetailField,
    NodeDetails,
    SyntheticPod,
    resolve_details,
)

__all__ = [
    "DEFAULT_POD_COUNT",
    "DetailField",
    "NodeDetails",
    "SyntheticPod",
    "resolve_details",
]
