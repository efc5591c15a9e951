"""Core resource graph data structures and enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class NodeKind(StrEnum):
    """Kubernetes resource kinds with dedicated presentation."""

    APPLICATION = "Application"
    INGRESS = "Ingress"
    SERVICE = "Service"
    DEPLOYMENT = "Deployment"
    REPLICA_SET = "ReplicaSet"
    STATEFUL_SET = "StatefulSet"
    POD = "Pod"
    CONFIG_MAP = "ConfigMap"
    SECRET = "Secret"
    UNKNOWN = "default"

    @classmethod
    def parse(cls, value: str | None) -> NodeKind:
        """Map a raw kind string to a member, UNKNOWN when unrecognized."""
        try:
            return cls(value) if value else cls.UNKNOWN
        except ValueError:
            return cls.UNKNOWN


class HealthStatus(StrEnum):
    """Argo-style health of a resource."""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    MISSING = "Missing"
    PROGRESSING = "Progressing"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str | None) -> HealthStatus:
        try:
            return cls(value) if value else cls.UNKNOWN
        except ValueError:
            return cls.UNKNOWN


class SyncStatus(StrEnum):
    """Argo-style sync state of a resource."""

    SYNCED = "Synced"
    OUT_OF_SYNC = "OutOfSync"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str | None) -> SyncStatus:
        try:
            return cls(value) if value else cls.UNKNOWN
        except ValueError:
            return cls.UNKNOWN


class EdgeStyle(StrEnum):
    """Visual class of a relationship."""

    SOLID = "solid"  # structural ownership
    DASHED = "dashed"  # runtime dependency or reference


@dataclass(frozen=True)
class Node:
    """A resource in the graph.

    ``kind_name`` keeps the raw kind string so unrecognized kinds still
    display what the data source sent; ``kind`` is the closed enum used for
    dispatch.
    """

    id: str
    kind_name: str
    name: str
    health: HealthStatus = HealthStatus.UNKNOWN
    sync: SyncStatus = SyncStatus.UNKNOWN
    attributes: dict[str, object] = field(default_factory=dict, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.parse(self.kind_name)

    def attr(self, key: str, default: object = None) -> object:
        """Return a kind-specific attribute such as ``image`` or ``clusterIP``."""
        return self.attributes.get(key, default)

    @property
    def badge(self) -> str | None:
        value = self.attributes.get("badge")
        return str(value) if value is not None else None


@dataclass(frozen=True)
class Edge:
    """A directed relationship between two nodes, referenced by id."""

    id: str
    source: str
    target: str
    style: EdgeStyle = EdgeStyle.SOLID
