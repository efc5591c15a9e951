"""FastAPI application factory for kubegraph.

Usage::

    from kubegraph.api.app import create_app

    app = create_app(composer=composer, config=config)

The factory is designed for use by both the production bootstrap
(``kubegraph.app``) and unit tests.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from kubegraph.api.routes import router
from kubegraph.api.schemas import ErrorResponse
from kubegraph.errors import GraphValidationError
from kubegraph.viewport.composer import ViewportComposer

_log = structlog.get_logger(component="api.app")

_API_PREFIX = "/api/v1"


def create_app(composer: ViewportComposer, config: Any = None) -> FastAPI:
    """Create and configure the kubegraph FastAPI application.

    Args:
        composer: ViewportComposer holding the served graph snapshot.
        config:   Optional KubeGraphConfig, kept for handlers that need it.

    Returns:
        Configured FastAPI application, ready to be served by uvicorn.
    """
    from kubegraph import __version__

    app = FastAPI(
        title="kubegraph",
        summary="Kubernetes resource graph layout API",
        version=__version__,
        description=(
            "kubegraph lays out a Kubernetes application's resource graph as a "
            "layered diagram and resolves click-to-inspect details."
        ),
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )

    app.state.composer = composer
    app.state.config = config

    app.include_router(router, prefix=_API_PREFIX)

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Map Pydantic validation errors to our error envelope."""
        errors = exc.errors()
        first_msg = str(errors[0].get("msg", "")) if errors else ""
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="INVALID_REQUEST", detail=first_msg).model_dump(),
        )

    @app.exception_handler(GraphValidationError)
    async def graph_validation_handler(
        _request: Request,
        exc: GraphValidationError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(error="INVALID_GRAPH", detail=str(exc)).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for unhandled exceptions; never expose stack traces."""
        _log.error(
            "unhandled_exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="INTERNAL_ERROR",
                detail="An unexpected error occurred.",
            ).model_dump(),
        )

    return app
