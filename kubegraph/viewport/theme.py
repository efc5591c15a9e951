"""Card icons and status colours used by rendered scenes."""

from __future__ import annotations

from kubegraph.models.resources import HealthStatus, NodeKind, SyncStatus

KIND_ICON: dict[NodeKind, str] = {
    NodeKind.APPLICATION: "📦",
    NodeKind.INGRESS: "🔀",
    NodeKind.SERVICE: "🗂️",
    NodeKind.DEPLOYMENT: "🔄",
    NodeKind.REPLICA_SET: "📚",
    NodeKind.STATEFUL_SET: "💾",
    NodeKind.POD: "🧫",
    NodeKind.CONFIG_MAP: "🧬",
    NodeKind.SECRET: "🔑",
    NodeKind.UNKNOWN: "📄",
}

HEALTH_COLOR: dict[HealthStatus, str] = {
    HealthStatus.HEALTHY: "#10b981",
    HealthStatus.DEGRADED: "#f59e0b",
    HealthStatus.MISSING: "#94a3b8",
    HealthStatus.PROGRESSING: "#0ea5e9",
    HealthStatus.UNKNOWN: "#94a3b8",
}

SYNC_COLOR: dict[SyncStatus, str] = {
    SyncStatus.SYNCED: "#059669",
    SyncStatus.OUT_OF_SYNC: "#b45309",
    SyncStatus.UNKNOWN: "#64748b",
}


def kind_icon(kind: NodeKind) -> str:
    return KIND_ICON.get(kind, KIND_ICON[NodeKind.UNKNOWN])
