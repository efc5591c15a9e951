"""Prometheus collectors for kubegraph."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

layout_total = Counter(
    "kubegraph_layout_total",
    "Layout requests, split by whether the memoized result was reused.",
    ["cached"],
)

layout_duration_seconds = Histogram(
    "kubegraph_layout_duration_seconds",
    "Wall time spent computing a layout (cache misses only).",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

layout_degraded_total = Counter(
    "kubegraph_layout_degraded_total",
    "Layouts computed with back-edges ignored for ranking.",
)

graph_validation_errors_total = Counter(
    "kubegraph_graph_validation_errors_total",
    "Graph snapshots rejected by validation.",
)

selection_rejected_total = Counter(
    "kubegraph_selection_rejected_total",
    "Selection requests naming a node absent from the current graph.",
)
