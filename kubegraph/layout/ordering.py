"""Phase 2 -- crossing reduction inside each rank.

Median heuristic with a fixed number of alternating sweeps.  Edges that
span several ranks are split by virtual vertices so every neighbour relation
is between adjacent ranks; virtual vertices only take part in ordering and
are dropped from the returned layers.

This is a heuristic.  It does not find the crossing-minimal order; it finds
the same order every time for the same input.
"""

from __future__ import annotations

from kubegraph.graph.model import GraphModel
from kubegraph.layout.ranking import Ranking

ORDER_PASSES = 8


class _LayeredGraph:
    """Integer vertex view of a ranked graph.

    Vertices ``0..n-1`` are real nodes in input order; vertices ``n..`` are
    virtual and numbered in creation order (sources in input order, then
    each source's out-edges from the graph adjacency), which doubles as
    their tie-break key.
    """

    def __init__(self, graph: GraphModel, ranking: Ranking) -> None:
        self.ids: list[str] = [node.id for node in graph.nodes]
        self.real_count = len(self.ids)
        self.rank: list[int] = [ranking.ranks[node_id] for node_id in self.ids]
        self.up: list[list[int]] = [[] for _ in range(self.real_count)]
        self.down: list[list[int]] = [[] for _ in range(self.real_count)]

        self.layers: list[list[int]] = [
            [graph.index_of(node_id) for node_id in layer] for layer in ranking.layers(graph)
        ]

        for source in range(self.real_count):
            for _, target in graph.out_edges(self.ids[source]):
                a, b = source, graph.index_of(target)
                if self.rank[a] == self.rank[b]:
                    continue
                if self.rank[a] > self.rank[b]:
                    a, b = b, a  # back-edges are ordered as if reversed
                prev = a
                for r in range(self.rank[a] + 1, self.rank[b]):
                    prev = self._link(prev, self._add_virtual(r))
                self._link(prev, b)

    def _add_virtual(self, rank: int) -> int:
        v = len(self.rank)
        self.rank.append(rank)
        self.up.append([])
        self.down.append([])
        self.layers[rank].append(v)
        return v

    def _link(self, upper: int, lower: int) -> int:
        self.down[upper].append(lower)
        self.up[lower].append(upper)
        return lower


def _median(positions: list[int]) -> float:
    positions = sorted(positions)
    mid = len(positions) // 2
    if len(positions) % 2:
        return float(positions[mid])
    return (positions[mid - 1] + positions[mid]) / 2


def _reorder(layer: list[int], fixed: list[int], neighbours: list[list[int]]) -> list[int]:
    """Sort *layer* by the median position of each vertex's neighbours in *fixed*."""
    pos = {v: i for i, v in enumerate(fixed)}
    keyed: list[tuple[float, int]] = []
    for i, v in enumerate(layer):
        adjacent = [pos[w] for w in neighbours[v] if w in pos]
        key = _median(adjacent) if adjacent else float(i)
        keyed.append((key, v))
    # vertex number is the input-order tie-break
    keyed.sort()
    return [v for _, v in keyed]


def count_crossings(layers: list[list[int]], down: list[list[int]]) -> int:
    """Count pairwise edge crossings between every pair of adjacent layers."""
    total = 0
    for upper, lower in zip(layers, layers[1:]):
        lower_pos = {v: i for i, v in enumerate(lower)}
        segments = [(i, lower_pos[w]) for i, v in enumerate(upper) for w in down[v] if w in lower_pos]
        for i, (a1, b1) in enumerate(segments):
            for a2, b2 in segments[i + 1 :]:
                if (a1 < a2 and b1 > b2) or (a1 > a2 and b1 < b2):
                    total += 1
    return total


def order_layers(graph: GraphModel, ranking: Ranking, passes: int = ORDER_PASSES) -> list[list[str]]:
    """Return node ids per rank in crossing-reduced order."""
    layered = _LayeredGraph(graph, ranking)
    layers = [list(layer) for layer in layered.layers]
    best = [list(layer) for layer in layers]
    best_crossings = count_crossings(layers, layered.down)

    for sweep in range(passes):
        if best_crossings == 0:
            break
        if sweep % 2 == 0:
            for r in range(1, len(layers)):
                layers[r] = _reorder(layers[r], layers[r - 1], layered.up)
        else:
            for r in range(len(layers) - 2, -1, -1):
                layers[r] = _reorder(layers[r], layers[r + 1], layered.down)
        crossings = count_crossings(layers, layered.down)
        if crossings < best_crossings:
            best = [list(layer) for layer in layers]
            best_crossings = crossings

    return [[layered.ids[v] for v in layer if v < layered.real_count] for layer in best]
