"""Selection state for the detail panel.

SelectionState is immutable.  Transitions return a SelectionChange holding
the state before and after, so event handlers pass the state in and get the
next one back; nothing is kept in module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from kubegraph.errors import UnknownNodeSelected
from kubegraph.graph.model import GraphModel


@dataclass(frozen=True)
class SelectionState:
    """At most one selected node id."""

    selected_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.selected_id is None

    def select(self, node_id: str, graph: GraphModel) -> SelectionChange:
        """Select *node_id* if it exists in *graph*.

        An unknown id leaves the state as it is and reports
        ``UnknownNodeSelected`` on the returned change instead of raising.
        """
        if node_id not in graph:
            return SelectionChange(previous=self, state=self, rejected=UnknownNodeSelected(node_id))
        return SelectionChange(previous=self, state=SelectionState(selected_id=node_id))

    def clear(self) -> SelectionChange:
        return SelectionChange(previous=self, state=SelectionState())


@dataclass(frozen=True)
class SelectionChange:
    """Outcome of a selection transition."""

    previous: SelectionState
    state: SelectionState
    rejected: UnknownNodeSelected | None = None

    @property
    def changed(self) -> bool:
        return self.previous.selected_id != self.state.selected_id
