"""Shared fixtures for kubegraph integration tests.

Provides the demo snapshot wired into a composer so integration tests can
exercise the full load -> layout -> click -> details pipeline.
"""

from __future__ import annotations

import pytest

from kubegraph.demo import demo_graph
from kubegraph.graph.model import GraphModel
from kubegraph.layout.engine import compute_layout
from kubegraph.models.layout import LayoutOptions, LayoutResult
from kubegraph.viewport.composer import ViewportComposer


@pytest.fixture
def demo() -> GraphModel:
    return demo_graph()


@pytest.fixture
def demo_layout(demo: GraphModel) -> LayoutResult:
    return compute_layout(demo, LayoutOptions())


@pytest.fixture
def composer(demo: GraphModel) -> ViewportComposer:
    return ViewportComposer(demo)
