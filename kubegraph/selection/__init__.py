"""Selection package -- single-node selection driving the detail view."""

from kubegraph.selection.state import SelectionChange, SelectionState

__all__ = ["SelectionChange", "SelectionState"]
