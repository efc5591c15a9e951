"""REST API layer for kubegraph.

Exposes:
    create_app -- FastAPI application factory.
    build_app  -- Alias for create_app (used by kubegraph.app bootstrap).
"""

from kubegraph.api.app import create_app

build_app = create_app

__all__ = ["build_app", "create_app"]
