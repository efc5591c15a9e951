"""Layered (Sugiyama-style) layout for resource graphs.

Submodules:
    ranking      -- Longest-path ranks with iterative back-edge detection.
    ordering     -- Median-heuristic crossing reduction with a fixed pass count.
    coordinates  -- Rank/cross-axis positions, margin translation, bounding box.
    edges        -- Style-derived rendering hints and smooth-step routes.
    engine       -- compute_layout() and the memoizing LayoutEngine.
"""

from kubegraph.layout.engine import LayoutEngine, compute_layout
from kubegraph.layout.ordering import ORDER_PASSES
from kubegraph.layout.ranking import Ranking, assign_ranks

__all__ = [
    "ORDER_PASSES",
    "LayoutEngine",
    "Ranking",
    "assign_ranks",
    "compute_layout",
]
