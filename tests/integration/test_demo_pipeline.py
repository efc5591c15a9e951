"""End-to-end tests over the online-store demo snapshot."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubegraph.graph.model import GraphModel
from kubegraph.layout.engine import compute_layout
from kubegraph.models.layout import Direction, LayoutOptions, LayoutResult
from kubegraph.models.resources import HealthStatus
from kubegraph.viewport.composer import ViewportComposer

pytestmark = pytest.mark.integration

_EXPECTED_RANKS = {
    "app": 0,
    "config": 1,
    "secret": 1,
    "ingress": 1,
    "frontend-deploy": 2,
    "backend-deploy": 2,
    "db-sts": 2,
    "frontend-rs": 3,
    "frontend-svc": 3,
    "backend-rs": 3,
    "backend-svc": 3,
    "db-svc": 3,
    "db-pod1": 3,
    "db-pod2": 3,
    "frontend-pod1": 4,
    "frontend-pod2": 4,
    "frontend-pod3": 4,
    "backend-pod1": 4,
    "backend-pod2": 4,
}


class TestDemoLayout:
    def test_ranks(self, demo_layout: LayoutResult) -> None:
        assert demo_layout.ranks == _EXPECTED_RANKS

    def test_acyclic_snapshot_is_not_degraded(self, demo_layout: LayoutResult) -> None:
        assert demo_layout.degraded is None

    def test_every_node_and_edge_laid_out(self, demo: GraphModel, demo_layout: LayoutResult) -> None:
        assert [n.id for n in demo_layout.nodes] == [n.id for n in demo.nodes]
        assert [e.edge.id for e in demo_layout.edges] == [e.id for e in demo.edges]

    def test_orders_are_dense_per_rank(self, demo_layout: LayoutResult) -> None:
        by_rank: dict[int, list[int]] = {}
        for ln in demo_layout.nodes:
            by_rank.setdefault(ln.rank, []).append(ln.order)
        for orders in by_rank.values():
            assert sorted(orders) == list(range(len(orders)))

    def test_edges_point_forward(self, demo: GraphModel, demo_layout: LayoutResult) -> None:
        for edge in demo.edges:
            assert demo_layout.node(edge.target).position.x > demo_layout.node(edge.source).position.x

    def test_pods_grouped_next_to_their_owner(self, demo: GraphModel, demo_layout: LayoutResult) -> None:
        segments = [
            (demo_layout.node(e.source).order, demo_layout.node(e.target).order)
            for e in demo.edges
            if demo_layout.node(e.source).rank == 3
        ]
        assert len(segments) == 5
        for a1, b1 in segments:
            for a2, b2 in segments:
                assert not (a1 < a2 and b1 > b2)

    def test_top_to_bottom_matches_rank_structure(self, demo: GraphModel, demo_layout: LayoutResult) -> None:
        tb = compute_layout(demo, LayoutOptions(direction=Direction.TOP_TO_BOTTOM))
        assert tb.ranks == demo_layout.ranks
        for ln in tb.nodes:
            assert ln.order == demo_layout.node(ln.id).order

    def test_deterministic(self, demo: GraphModel, demo_layout: LayoutResult) -> None:
        assert compute_layout(demo, LayoutOptions()) == demo_layout


class TestClickToDetails:
    def test_replicaset_click_shows_synthetic_pods(self, composer: ViewportComposer) -> None:
        composer.node_clicked("frontend-rs")
        details = composer.details()
        assert details is not None
        assert [p.name for p in details.pods] == [
            "frontend-7f8d9c-1",
            "frontend-7f8d9c-2",
            "frontend-7f8d9c-3",
        ]
        assert [p.host for p in details.pods] == ["node-0", "node-1", "node-2"]
        assert all(p.status is HealthStatus.HEALTHY for p in details.pods)

    def test_statefulset_click_uses_replicas(self, composer: ViewportComposer) -> None:
        composer.node_clicked("db-sts")
        details = composer.details()
        assert details is not None
        assert [p.name for p in details.pods] == ["postgres-1", "postgres-2"]

    def test_click_sequence(self, composer: ViewportComposer) -> None:
        listener = MagicMock()
        composer.subscribe(listener)

        composer.node_clicked("ingress")
        composer.node_clicked("ghost")
        composer.node_clicked("secret")
        composer.background_clicked()

        seen = [call.args[0].state.selected_id for call in listener.call_args_list]
        assert seen == ["ingress", "secret", None]
        assert composer.details() is None

    def test_selection_does_not_move_cards(self, composer: ViewportComposer) -> None:
        before = composer.scene()
        composer.node_clicked("backend-deploy")
        after = composer.scene()
        assert [n.position for n in after.nodes] == [n.position for n in before.nodes]
        assert after.container == before.container
