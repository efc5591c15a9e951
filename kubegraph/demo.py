"""Built-in "online-store" snapshot used when no graph file is configured.

An Argo-style Application owning a frontend and backend Deployment, a
Postgres StatefulSet, their ReplicaSets, Pods and Services, plus a
ConfigMap, a Secret and an Ingress.  Dashed edges are runtime references
(traffic, mounted config), solid edges are ownership.
"""

from __future__ import annotations

from typing import Any

from kubegraph.graph.model import GraphModel
from kubegraph.graph.schema import graph_from_document

DEMO_NODES: list[dict[str, Any]] = [
    {"id": "app", "kind": "Application", "name": "online-store", "health": "Healthy", "sync": "Synced"},
    {"id": "frontend-deploy", "kind": "Deployment", "name": "frontend", "health": "Healthy", "sync": "Synced", "image": "nginx:1.25", "replicas": "3/3"},
    {"id": "frontend-rs", "kind": "ReplicaSet", "name": "frontend-7f8d9c", "health": "Healthy", "sync": "Synced", "badge": "3 pods"},
    {"id": "frontend-pod1", "kind": "Pod", "name": "frontend-7f8d9c-1", "node": "node-a", "ready": "1/1"},
    {"id": "frontend-pod2", "kind": "Pod", "name": "frontend-7f8d9c-2", "node": "node-b", "ready": "1/1"},
    {"id": "frontend-pod3", "kind": "Pod", "name": "frontend-7f8d9c-3", "node": "node-c", "ready": "1/1"},
    {"id": "frontend-svc", "kind": "Service", "name": "frontend-svc", "type": "ClusterIP", "clusterIP": "10.96.12.34", "ports": ["80/TCP"]},
    {"id": "backend-deploy", "kind": "Deployment", "name": "backend", "health": "Healthy", "sync": "Synced", "image": "python:3.11", "replicas": "2/2"},
    {"id": "backend-rs", "kind": "ReplicaSet", "name": "backend-5d4c3b", "badge": "2 pods"},
    {"id": "backend-pod1", "kind": "Pod", "name": "backend-5d4c3b-1", "node": "node-b", "ready": "1/1"},
    {"id": "backend-pod2", "kind": "Pod", "name": "backend-5d4c3b-2", "node": "node-c", "ready": "1/1"},
    {"id": "backend-svc", "kind": "Service", "name": "backend-svc", "type": "ClusterIP", "clusterIP": "10.96.55.21", "ports": ["8080/TCP"]},
    {"id": "db-sts", "kind": "StatefulSet", "name": "postgres", "replicas": "2/2", "image": "postgres:15"},
    {"id": "db-pod1", "kind": "Pod", "name": "postgres-0", "node": "node-a", "ready": "1/1"},
    {"id": "db-pod2", "kind": "Pod", "name": "postgres-1", "node": "node-b", "ready": "1/1"},
    {"id": "db-svc", "kind": "Service", "name": "postgres", "type": "ClusterIP", "clusterIP": "10.96.77.88", "ports": ["5432/TCP"]},
    {"id": "config", "kind": "ConfigMap", "name": "app-config", "keys": ["APP_MODE", "API_URL"]},
    {"id": "secret", "kind": "Secret", "name": "db-credentials", "secretType": "Opaque", "keys": ["username", "password"]},
    {"id": "ingress", "kind": "Ingress", "name": "online-store.example.com", "host": "online-store.example.com", "paths": ["/ -> frontend-svc:80"]},
]

DEMO_EDGES: list[dict[str, Any]] = [
    {"id": "e1", "source": "app", "target": "frontend-deploy"},
    {"id": "e2", "source": "app", "target": "backend-deploy"},
    {"id": "e3", "source": "app", "target": "db-sts"},
    {"id": "e4", "source": "app", "target": "config"},
    {"id": "e5", "source": "app", "target": "secret"},
    {"id": "e6", "source": "app", "target": "ingress"},
    {"id": "e7", "source": "frontend-deploy", "target": "frontend-rs"},
    {"id": "e8", "source": "frontend-rs", "target": "frontend-pod1"},
    {"id": "e9", "source": "frontend-rs", "target": "frontend-pod2"},
    {"id": "e10", "source": "frontend-rs", "target": "frontend-pod3"},
    {"id": "e11", "source": "frontend-deploy", "target": "frontend-svc"},
    {"id": "e12", "source": "backend-deploy", "target": "backend-rs"},
    {"id": "e13", "source": "backend-rs", "target": "backend-pod1"},
    {"id": "e14", "source": "backend-rs", "target": "backend-pod2"},
    {"id": "e15", "source": "backend-deploy", "target": "backend-svc"},
    {"id": "e16", "source": "db-sts", "target": "db-pod1"},
    {"id": "e17", "source": "db-sts", "target": "db-pod2"},
    {"id": "e18", "source": "db-sts", "target": "db-svc"},
    {"id": "e19", "source": "ingress", "target": "frontend-svc", "type": "dashed"},
    {"id": "e20", "source": "frontend-deploy", "target": "backend-svc", "type": "dashed"},
    {"id": "e21", "source": "backend-deploy", "target": "db-svc", "type": "dashed"},
    {"id": "e22", "source": "config", "target": "frontend-deploy", "type": "dashed"},
    {"id": "e23", "source": "config", "target": "backend-deploy", "type": "dashed"},
    {"id": "e24", "source": "secret", "target": "backend-deploy", "type": "dashed"},
    {"id": "e25", "source": "secret", "target": "db-sts", "type": "dashed"},
]


def demo_graph() -> GraphModel:
    """Build a fresh GraphModel of the online-store snapshot."""
    return graph_from_document({"nodes": DEMO_NODES, "edges": DEMO_EDGES})
