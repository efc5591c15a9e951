"""Edge rendering hints and smooth-step routes."""

from __future__ import annotations

from kubegraph.models.layout import Direction, EdgeHints, LayoutNode, Point
from kubegraph.models.resources import EdgeStyle

_SOLID = EdgeHints()
_DASHED = EdgeHints(dash_array="6 6")


def edge_hints(style: EdgeStyle) -> EdgeHints:
    """Hints depend on the style alone."""
    return _DASHED if style is EdgeStyle.DASHED else _SOLID


def smooth_step_route(source: LayoutNode, target: LayoutNode, direction: Direction) -> tuple[Point, ...]:
    """Orthogonal elbow from the source port to the target port.

    Ports sit at the trailing/leading edge centres along the rank axis
    (right/left for LR, bottom/top for TB).  The bend is at the midpoint of
    the rank axis; renderers round the two corners with ``corner_radius``.
    """
    sp, sz = source.position, source.size
    tp, tz = target.position, target.size
    if direction is Direction.LEFT_TO_RIGHT:
        start = Point(sp.x + sz.width, sp.y + sz.height / 2)
        end = Point(tp.x, tp.y + tz.height / 2)
        if start.y == end.y:
            return (start, end)
        mid = (start.x + end.x) / 2
        return (start, Point(mid, start.y), Point(mid, end.y), end)

    start = Point(sp.x + sz.width / 2, sp.y + sz.height)
    end = Point(tp.x + tz.width / 2, tp.y)
    if start.x == end.x:
        return (start, end)
    mid = (start.y + end.y) / 2
    return (start, Point(start.x, mid), Point(end.x, mid), end)
