"""Detail panel content per resource kind.

resolve_details() is pure: the same node always resolves to the same
fields.  Pod summaries produced for ReplicaSets and StatefulSets are
placeholders derived from the badge/replica text, flagged ``synthetic`` so
they can never be mistaken for pods taken from the graph.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from kubegraph.models.resources import HealthStatus, Node, NodeKind

DEFAULT_POD_COUNT = 3
_PLACEHOLDER_HOSTS = 3

_RE_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class DetailField:
    label: str
    value: str


@dataclass(frozen=True)
class SyntheticPod:
    """Display-only pod summary; not backed by graph data."""

    name: str
    status: HealthStatus = HealthStatus.HEALTHY
    ready: str = "1/1"
    host: str = ""
    synthetic: bool = True


@dataclass(frozen=True)
class NodeDetails:
    """Everything the side panel shows for one node."""

    node_id: str
    title: str
    summary: tuple[DetailField, ...]
    fields: tuple[DetailField, ...]
    pods: tuple[SyntheticPod, ...] = ()


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def _field(node: Node, label: str, key: str) -> DetailField:
    return DetailField(label, _text(node.attr(key)))


def parse_count(text: object) -> int | None:
    """Leading integer of *text* ("3 pods" -> 3, "2/2" -> 2), None if absent."""
    if text is None:
        return None
    match = _RE_LEADING_INT.match(str(text))
    return int(match.group(1)) if match else None


def synthetic_pods(parent_name: str, count: int) -> tuple[SyntheticPod, ...]:
    """Deterministic placeholder pods ``{parent}-1..count`` on round-robin hosts."""
    return tuple(
        SyntheticPod(name=f"{parent_name}-{i + 1}", host=f"node-{i % _PLACEHOLDER_HOSTS}")
        for i in range(count)
    )


def _pod_count(node: Node) -> int:
    for key in ("badge", "replicas"):
        count = parse_count(node.attr(key))
        if count is not None and count > 0:
            return count
    return DEFAULT_POD_COUNT


def kind_fields(node: Node) -> tuple[DetailField, ...]:
    """Kind-specific (label, value) fields in display order."""
    match node.kind:
        case NodeKind.DEPLOYMENT | NodeKind.STATEFUL_SET:
            return (_field(node, "Image", "image"), _field(node, "Replicas", "replicas"))
        case NodeKind.REPLICA_SET:
            return (_field(node, "Pods", "badge"),)
        case NodeKind.POD:
            return (_field(node, "Node", "node"), _field(node, "Ready", "ready"))
        case NodeKind.SERVICE:
            return (
                _field(node, "Type", "type"),
                _field(node, "ClusterIP", "clusterIP"),
                _field(node, "Ports", "ports"),
            )
        case NodeKind.INGRESS:
            return (_field(node, "Host", "host"), _field(node, "Paths", "paths"))
        case NodeKind.CONFIG_MAP:
            return (_field(node, "Keys", "keys"),)
        case NodeKind.SECRET:
            return (_field(node, "Type", "secretType"), _field(node, "Keys", "keys"))
        case _:
            return (DetailField("Info", "No extra info"),)


def resolve_details(node: Node) -> NodeDetails:
    """Build the detail panel content for *node*."""
    pods: tuple[SyntheticPod, ...] = ()
    if node.kind in (NodeKind.REPLICA_SET, NodeKind.STATEFUL_SET):
        pods = synthetic_pods(node.name, _pod_count(node))

    return NodeDetails(
        node_id=node.id,
        title=node.name,
        summary=(
            DetailField("Kind", node.kind_name),
            DetailField("Health", node.health.value),
            DetailField("Sync", node.sync.value),
        ),
        fields=kind_fields(node),
        pods=pods,
    )
