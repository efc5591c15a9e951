"""Tests for the kubegraph REST API."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient

from kubegraph.api.app import create_app
from kubegraph.demo import demo_graph
from kubegraph.viewport.composer import ViewportComposer

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_client() -> tuple[TestClient, ViewportComposer]:
    composer = ViewportComposer(demo_graph())
    app = create_app(composer=composer)
    return TestClient(app, raise_server_exceptions=False), composer


def _small_document(**extra_edge: Any) -> dict[str, Any]:
    return {
        "nodes": [
            {"id": "d", "kind": "Deployment", "name": "web", "health": "Healthy", "sync": "Synced"},
            {"id": "rs", "kind": "ReplicaSet", "name": "web-1", "badge": "2 pods"},
        ],
        "edges": [{"id": "e", "source": "d", "target": "rs", **extra_edge}],
    }


# ===========================================================================
# GET /health
# ===========================================================================


class TestHealth:
    def test_reports_snapshot_size(self) -> None:
        client, _ = _make_client()
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "nodes": 19, "edges": 25}


# ===========================================================================
# GET /scene
# ===========================================================================


class TestScene:
    def test_scene_has_every_node_and_edge(self) -> None:
        client, _ = _make_client()
        body = client.get("/api/v1/scene").json()
        assert len(body["nodes"]) == 19
        assert len(body["edges"]) == 25
        assert body["direction"] == "LR"
        assert body["selected_id"] is None
        assert body["warnings"] == []

    def test_container_covers_cards(self) -> None:
        client, _ = _make_client()
        body = client.get("/api/v1/scene").json()
        width = body["container"]["width"]
        height = body["container"]["height"]
        for node in body["nodes"]:
            assert node["position"]["x"] + node["size"]["width"] <= width
            assert node["position"]["y"] + node["size"]["height"] <= height

    def test_dashed_edges_carry_dash_array(self) -> None:
        client, _ = _make_client()
        edges = {e["id"]: e for e in client.get("/api/v1/scene").json()["edges"]}
        assert edges["e1"]["dash_array"] is None
        assert edges["e19"]["dash_array"] == "6 6"


# ===========================================================================
# POST /layout
# ===========================================================================


class TestLayout:
    def test_lays_out_posted_document(self) -> None:
        client, _ = _make_client()
        resp = client.post("/api/v1/layout", json=_small_document())
        assert resp.status_code == 200
        body = resp.json()
        assert [n["id"] for n in body["nodes"]] == ["d", "rs"]
        assert body["nodes"][0]["position"] == {"x": 100.0, "y": 100.0}

    def test_does_not_replace_served_snapshot(self) -> None:
        client, composer = _make_client()
        graph = composer.graph
        client.post("/api/v1/layout", json=_small_document())
        assert composer.graph is graph

    def test_dangling_edge_returns_422(self) -> None:
        client, _ = _make_client()
        doc = _small_document()
        doc["edges"][0]["target"] = "ghost"
        resp = client.post("/api/v1/layout", json=doc)
        assert resp.status_code == 422
        body = resp.json()
        assert body["error"] == "INVALID_GRAPH"
        assert body["detail"].endswith("dangling references: e")

    def test_malformed_body_returns_400(self) -> None:
        client, _ = _make_client()
        resp = client.post("/api/v1/layout", json={"nodes": [{"kind": "Pod"}]})
        assert resp.status_code == 400
        assert resp.json()["error"] == "INVALID_REQUEST"

    def test_cycle_is_a_warning(self) -> None:
        client, _ = _make_client()
        doc = _small_document()
        doc["edges"].append({"id": "back", "source": "rs", "target": "d"})
        body = client.post("/api/v1/layout", json=doc).json()
        assert len(body["warnings"]) == 1
        assert "back" in body["warnings"][0]


# ===========================================================================
# PUT /graph
# ===========================================================================


class TestReplaceGraph:
    def test_replaces_snapshot_and_clears_selection(self) -> None:
        client, composer = _make_client()
        client.post("/api/v1/select", json={"node_id": "frontend-rs"})
        resp = client.put("/api/v1/graph", json=_small_document(type="dashed"))
        assert resp.status_code == 200
        assert resp.json()["selected_id"] is None
        assert resp.json()["edges"][0]["dash_array"] == "6 6"
        assert composer.selection.selected_id is None
        assert client.get("/api/v1/health").json()["nodes"] == 2

    def test_invalid_snapshot_keeps_previous(self) -> None:
        client, _ = _make_client()
        doc = _small_document()
        doc["nodes"].append(dict(doc["nodes"][0]))
        resp = client.put("/api/v1/graph", json=doc)
        assert resp.status_code == 422
        assert client.get("/api/v1/health").json()["nodes"] == 19


# ===========================================================================
# Selection
# ===========================================================================


class TestSelection:
    def test_select_returns_details(self) -> None:
        client, _ = _make_client()
        resp = client.post("/api/v1/select", json={"node_id": "frontend-rs"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["selected_id"] == "frontend-rs"
        assert body["details"]["title"] == "frontend-7f8d9c"
        assert [p["name"] for p in body["details"]["pods"]] == [
            "frontend-7f8d9c-1",
            "frontend-7f8d9c-2",
            "frontend-7f8d9c-3",
        ]

    def test_selected_node_flagged_in_scene(self) -> None:
        client, _ = _make_client()
        client.post("/api/v1/select", json={"node_id": "db-sts"})
        body = client.get("/api/v1/scene").json()
        assert body["selected_id"] == "db-sts"
        assert [n["id"] for n in body["nodes"] if n["selected"]] == ["db-sts"]

    def test_unknown_node_returns_404_and_keeps_selection(self) -> None:
        client, composer = _make_client()
        client.post("/api/v1/select", json={"node_id": "config"})
        resp = client.post("/api/v1/select", json={"node_id": "ghost"})
        assert resp.status_code == 404
        assert resp.json()["error"] == "UNKNOWN_NODE"
        assert "ghost" in resp.json()["detail"]
        assert composer.selection.selected_id == "config"

    def test_missing_node_id_returns_400(self) -> None:
        client, _ = _make_client()
        resp = client.post("/api/v1/select", json={})
        assert resp.status_code == 400

    def test_clear(self) -> None:
        client, _ = _make_client()
        client.post("/api/v1/select", json={"node_id": "secret"})
        resp = client.post("/api/v1/clear")
        assert resp.status_code == 200
        assert resp.json() == {"selected_id": None, "details": None}
        assert client.get("/api/v1/details").json() is None

    def test_details_follow_selection(self) -> None:
        client, _ = _make_client()
        assert client.get("/api/v1/details").json() is None
        client.post("/api/v1/select", json={"node_id": "secret"})
        body = client.get("/api/v1/details").json()
        assert body["node_id"] == "secret"
        assert {"label": "Type", "value": "Opaque"} in body["fields"]


# ===========================================================================
# GET /metrics
# ===========================================================================


class TestMetrics:
    def test_exposes_layout_counters(self) -> None:
        client, _ = _make_client()
        client.get("/api/v1/scene")
        resp = client.get("/api/v1/metrics")
        assert resp.status_code == 200
        assert "kubegraph_layout_total" in resp.text
