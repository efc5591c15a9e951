"""Phase 3 -- coordinate assignment and bounding box."""

from __future__ import annotations

from collections.abc import Mapping

from kubegraph.models.layout import Direction, LayoutOptions, Point, Size


def assign_coordinates(layers: list[list[str]], options: LayoutOptions) -> dict[str, Point]:
    """Map ordered layers to top-left node positions.

    The primary (rank) axis advances by node extent plus ``rank_sep`` per
    rank.  Along the cross axis each rank is packed with ``node_sep`` gaps
    and centred on a shared baseline.  Everything is then shifted so the
    smallest x and y equal ``options.margin``.
    """
    horizontal = options.direction is Direction.LEFT_TO_RIGHT
    primary_extent = options.node_width if horizontal else options.node_height
    cross_extent = options.node_height if horizontal else options.node_width
    cross_step = cross_extent + options.node_sep

    raw: dict[str, tuple[float, float]] = {}
    for rank, layer in enumerate(layers):
        primary = rank * (primary_extent + options.rank_sep)
        span = len(layer) * cross_extent + (len(layer) - 1) * options.node_sep
        start = -span / 2
        for i, node_id in enumerate(layer):
            cross = start + i * cross_step
            raw[node_id] = (primary, cross) if horizontal else (cross, primary)

    if not raw:
        return {}

    min_x = min(x for x, _ in raw.values())
    min_y = min(y for _, y in raw.values())
    dx = options.margin - min_x
    dy = options.margin - min_y
    return {node_id: Point(x + dx, y + dy) for node_id, (x, y) in raw.items()}


def bounding_box(positions: Mapping[str, Point], size: Size, margin: float) -> Size:
    """Smallest box holding every node rectangle with *margin* on all sides."""
    if not positions:
        return Size(0.0, 0.0)
    min_x = min(p.x for p in positions.values())
    min_y = min(p.y for p in positions.values())
    max_x = max(p.x for p in positions.values()) + size.width
    max_y = max(p.y for p in positions.values()) + size.height
    return Size(max_x - min_x + 2 * margin, max_y - min_y + 2 * margin)
