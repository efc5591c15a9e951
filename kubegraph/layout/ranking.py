"""Phase 1 -- rank assignment.

Longest path from sources: every source gets rank 0 and every other node
sits one rank past its furthest predecessor.  Cycles are broken first by an
iterative depth-first traversal over node indices; edges that close a cycle
(back-edges, including self-loops) are excluded from ranking and reported.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from kubegraph.graph.model import GraphModel

_WHITE = 0  # not yet visited
_GREY = 1  # on the current DFS path
_BLACK = 2  # finished


@dataclass(frozen=True)
class Ranking:
    """Rank per node id plus the edges ignored to get there."""

    ranks: dict[str, int]
    back_edges: tuple[str, ...] = ()

    @property
    def rank_count(self) -> int:
        return max(self.ranks.values()) + 1 if self.ranks else 0

    def layers(self, graph: GraphModel) -> list[list[str]]:
        """Node ids grouped by rank, each group in input order."""
        layers: list[list[str]] = [[] for _ in range(self.rank_count)]
        for node in graph.nodes:
            layers[self.ranks[node.id]].append(node.id)
        return layers


def _out_edges(graph: GraphModel) -> list[list[tuple[str, int]]]:
    """Per node index, its (edge id, target index) pairs from the graph's adjacency."""
    return [
        [(edge_id, graph.index_of(target)) for edge_id, target in graph.out_edges(node.id)]
        for node in graph.nodes
    ]


def find_back_edges(graph: GraphModel) -> set[str]:
    """Return ids of edges that close a cycle.

    Roots are tried in input order and each node's out-edges are followed in
    adjacency order (targets by first appearance in the input), so the same
    snapshot always yields the same set.  Uses an
    explicit stack; deep graphs cannot exhaust the interpreter's recursion
    limit.
    """
    out = _out_edges(graph)
    state = [_WHITE] * len(graph)
    back: set[str] = set()

    for root in range(len(graph)):
        if state[root] != _WHITE:
            continue
        state[root] = _GREY
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            u, cursor = stack[-1]
            if cursor < len(out[u]):
                stack[-1] = (u, cursor + 1)
                edge_id, v = out[u][cursor]
                if state[v] == _GREY:
                    back.add(edge_id)
                elif state[v] == _WHITE:
                    state[v] = _GREY
                    stack.append((v, 0))
            else:
                state[u] = _BLACK
                stack.pop()
    return back


def assign_ranks(graph: GraphModel) -> Ranking:
    """Compute longest-path ranks, ignoring back-edges."""
    back = find_back_edges(graph)
    n = len(graph)
    succ: list[list[int]] = [[v for edge_id, v in out if edge_id not in back] for out in _out_edges(graph)]
    indegree = [0] * n
    for targets in succ:
        for v in targets:
            indegree[v] += 1

    rank = [0] * n
    queue = deque(i for i in range(n) if indegree[i] == 0)
    while queue:
        u = queue.popleft()
        for v in succ[u]:
            rank[v] = max(rank[v], rank[u] + 1)
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)

    ranks = {node.id: rank[i] for i, node in enumerate(graph.nodes)}
    back_edges = tuple(edge.id for edge in graph.edges if edge.id in back)
    return Ranking(ranks=ranks, back_edges=back_edges)
