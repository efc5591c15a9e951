"""Viewport package -- renderable scenes and click handling."""

from kubegraph.viewport.composer import (
    Scene,
    SceneEdge,
    SceneNode,
    ViewportComposer,
    compose_scene,
)

__all__ = [
    "Scene",
    "SceneEdge",
    "SceneNode",
    "ViewportComposer",
    "compose_scene",
]
