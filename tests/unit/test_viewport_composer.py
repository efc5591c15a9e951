"""Tests for ViewportComposer scenes and click handling."""

from __future__ import annotations

from unittest.mock import MagicMock

from prometheus_client import REGISTRY

from kubegraph.graph.model import GraphModel
from kubegraph.models.layout import LayoutOptions, Size
from kubegraph.models.resources import Edge, EdgeStyle, HealthStatus, Node, NodeKind, SyncStatus
from kubegraph.viewport.composer import ViewportComposer
from kubegraph.viewport.theme import HEALTH_COLOR, KIND_ICON, SYNC_COLOR, kind_icon


def _make_graph() -> GraphModel:
    return GraphModel(
        [
            Node(id="deploy", kind_name="Deployment", name="web", health=HealthStatus.HEALTHY, sync=SyncStatus.SYNCED),
            Node(id="rs", kind_name="ReplicaSet", name="web-abc", attributes={"badge": "2 pods"}),
            Node(id="cm", kind_name="ConfigMap", name="cfg", attributes={"keys": ["A"]}),
        ],
        [
            Edge(id="e1", source="deploy", target="rs"),
            Edge(id="e2", source="cm", target="deploy", style=EdgeStyle.DASHED),
        ],
    )


class TestScene:
    def test_one_scene_node_per_graph_node(self) -> None:
        scene = ViewportComposer(_make_graph()).scene()
        assert [n.id for n in scene.nodes] == ["deploy", "rs", "cm"]
        assert [e.id for e in scene.edges] == ["e1", "e2"]

    def test_card_decorations(self) -> None:
        scene = ViewportComposer(_make_graph()).scene()
        deploy = scene.nodes[0]
        assert deploy.icon == KIND_ICON[NodeKind.DEPLOYMENT]
        assert deploy.health_color == HEALTH_COLOR[HealthStatus.HEALTHY]
        assert deploy.sync_color == SYNC_COLOR[SyncStatus.SYNCED]
        rs = scene.nodes[1]
        assert rs.badge == "2 pods"
        assert rs.health is HealthStatus.UNKNOWN
        assert rs.health_color == HEALTH_COLOR[HealthStatus.UNKNOWN]

    def test_unknown_kind_gets_default_icon(self) -> None:
        assert kind_icon(NodeKind.UNKNOWN) == KIND_ICON[NodeKind.UNKNOWN]

    def test_container_matches_bounding_box(self) -> None:
        composer = ViewportComposer(_make_graph())
        assert composer.scene().container == composer.layout().bounding_box

    def test_dashed_edge_hint(self) -> None:
        scene = ViewportComposer(_make_graph()).scene()
        assert scene.edges[0].dash_array is None
        assert scene.edges[1].dash_array == "6 6"
        assert scene.edges[1].stroke == "#94a3b8"

    def test_options_flow_to_layout(self) -> None:
        composer = ViewportComposer(GraphModel([Node(id="a", kind_name="Pod", name="a")]), LayoutOptions(margin=10))
        assert composer.scene().container == Size(280.0, 110.0)

    def test_cycle_warning_in_scene(self) -> None:
        graph = GraphModel(
            [Node(id="a", kind_name="Pod", name="a"), Node(id="b", kind_name="Pod", name="b")],
            [Edge(id="x", source="a", target="b"), Edge(id="y", source="b", target="a")],
        )
        scene = ViewportComposer(graph).scene()
        assert len(scene.warnings) == 1
        assert scene.warnings[0].endswith(": y")

    def test_layout_is_memoized_across_scenes(self) -> None:
        composer = ViewportComposer(_make_graph())
        assert composer.layout() is composer.layout()


class TestClicks:
    def test_node_click_selects_and_marks_scene(self) -> None:
        composer = ViewportComposer(_make_graph())
        composer.node_clicked("rs")
        scene = composer.scene()
        assert scene.selected_id == "rs"
        assert [n.id for n in scene.nodes if n.selected] == ["rs"]

    def test_details_follow_selection(self) -> None:
        composer = ViewportComposer(_make_graph())
        assert composer.details() is None
        composer.node_clicked("rs")
        details = composer.details()
        assert details is not None
        assert details.title == "web-abc"
        assert len(details.pods) == 2

    def test_background_click_clears(self) -> None:
        composer = ViewportComposer(_make_graph())
        composer.node_clicked("deploy")
        composer.background_clicked()
        assert composer.selection.selected_id is None
        assert composer.details() is None

    def test_unknown_click_is_rejected_without_raising(self) -> None:
        composer = ViewportComposer(_make_graph())
        composer.node_clicked("deploy")
        before = REGISTRY.get_sample_value("kubegraph_selection_rejected_total") or 0.0
        change = composer.node_clicked("ghost")
        assert change.rejected is not None
        assert composer.selection.selected_id == "deploy"
        assert REGISTRY.get_sample_value("kubegraph_selection_rejected_total") == before + 1

    def test_subscribers_notified_synchronously(self) -> None:
        composer = ViewportComposer(_make_graph())
        listener = MagicMock()
        composer.subscribe(listener)
        change = composer.node_clicked("cm")
        listener.assert_called_once_with(change)

    def test_subscribers_not_notified_for_rejections(self) -> None:
        composer = ViewportComposer(_make_graph())
        listener = MagicMock()
        composer.subscribe(listener)
        composer.node_clicked("ghost")
        listener.assert_not_called()


class TestSnapshotReload:
    def test_load_resets_selection(self) -> None:
        composer = ViewportComposer(_make_graph())
        composer.node_clicked("deploy")
        composer.load(_make_graph())
        assert composer.selection.selected_id is None

    def test_load_invalidates_layout_cache(self) -> None:
        composer = ViewportComposer(_make_graph())
        first = composer.layout()
        composer.load(GraphModel([Node(id="solo", kind_name="Pod", name="solo")]))
        second = composer.layout()
        assert second is not first
        assert [n.id for n in second.nodes] == ["solo"]
