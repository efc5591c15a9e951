"""Application bootstrap for kubegraph.

Wires the components in dependency order and manages the asyncio lifecycle.
Startup order: config -> logging -> graph snapshot -> composer -> REST

Shutdown stops the REST server and cancels background tasks.  A failure to
load the graph snapshot or to bind the server is fatal and exits non-zero.
"""

from __future__ import annotations

import asyncio
import signal
from typing import TYPE_CHECKING

from kubegraph.config import load_config
from kubegraph.models.config import KubeGraphConfig
from kubegraph.models.layout import Direction, LayoutOptions
from kubegraph.observability.logging import get_logger, setup_logging

if TYPE_CHECKING:
    import structlog

    from kubegraph.graph.model import GraphModel
    from kubegraph.viewport.composer import ViewportComposer


class _ComponentError(Exception):
    """Raised when a mandatory component fails to start."""

    def __init__(self, component: str, cause: Exception) -> None:
        super().__init__(f"Component '{component}' failed to start: {cause}")
        self.component = component
        self.cause = cause


def layout_options(config: KubeGraphConfig) -> LayoutOptions:
    """Translate the layout section of the config into LayoutOptions."""
    layout = config.layout
    return LayoutOptions(
        direction=Direction(layout.direction),
        node_width=float(layout.node_width),
        node_height=float(layout.node_height),
        node_sep=float(layout.node_sep),
        rank_sep=float(layout.rank_sep),
        margin=float(layout.margin),
    )


class KubeGraphApp:
    """Application root.  Owns every component and coordinates their lifecycle.

    ``stop()`` is safe to call on an app that was never started or was
    already stopped.
    """

    def __init__(self, config: KubeGraphConfig | None = None) -> None:
        self.config: KubeGraphConfig | None = config
        self._graph: GraphModel | None = None
        self._composer: ViewportComposer | None = None
        self._rest_server: object | None = None
        self._background_tasks: list[asyncio.Task[None]] = []
        self._running = False
        self._log: structlog.stdlib.BoundLogger | None = None

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Start all components in dependency order.

        Raises _ComponentError if a mandatory component cannot start.
        """
        # --- 1. Configuration -------------------------------------------
        if self.config is None:
            self.config = load_config()

        # --- 2. Logging -------------------------------------------------
        setup_logging(self.config.log.level, self.config.log.format)
        self._log = get_logger("app")
        self._log.info("kubegraph starting", version=_kubegraph_version())

        # --- 3. Graph snapshot ------------------------------------------
        self._load_graph()

        # --- 4. Composer ------------------------------------------------
        self._start_composer()

        # --- 5. REST API ------------------------------------------------
        await self._start_rest()

        self._running = True
        self._log.info("kubegraph started", port=self.config.api.port)

    def _load_graph(self) -> None:
        """Load the configured graph file, or the demo graph when none is set."""
        assert self._log is not None
        assert self.config is not None
        path = self.config.source.graph_file
        try:
            if path:
                from kubegraph.graph.schema import load_graph_file

                self._graph = load_graph_file(path)
                self._log.info("graph loaded from file", path=path, nodes=len(self._graph))
            else:
                from kubegraph.demo import demo_graph

                self._graph = demo_graph()
                self._log.info("demo graph loaded", nodes=len(self._graph))
        except Exception as exc:
            raise _ComponentError("graph", exc) from exc

    def _start_composer(self) -> None:
        assert self.config is not None
        assert self._graph is not None
        from kubegraph.viewport.composer import ViewportComposer

        self._composer = ViewportComposer(self._graph, layout_options(self.config))
        # Lay out once so the first request is served from the cache.
        self._composer.layout()

    async def _start_rest(self) -> None:
        """Start the uvicorn REST server."""
        assert self._log is not None
        assert self.config is not None
        assert self._composer is not None
        self._log.debug("starting rest api")
        try:
            import uvicorn

            from kubegraph.api import build_app

            fastapi_app = build_app(composer=self._composer, config=self.config)
            uv_config = uvicorn.Config(
                app=fastapi_app,
                host="0.0.0.0",
                port=self.config.api.port,
                log_config=None,  # structlog handles all logging
                access_log=False,
            )
            server = uvicorn.Server(uv_config)
            task = asyncio.create_task(server.serve(), name="rest-server")
            self._background_tasks.append(task)
            self._rest_server = server
            self._log.info("rest api started", port=self.config.api.port)
        except Exception as exc:
            raise _ComponentError("rest", exc) from exc

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    async def stop(self) -> None:
        """Stop the REST server and cancel background tasks."""
        if self._rest_server is not None:
            self._rest_server.should_exit = True  # type: ignore[attr-defined]
            self._rest_server = None

        for task in self._background_tasks:
            task.cancel()
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)
        self._background_tasks.clear()

        if self._running and self._log is not None:
            self._log.info("kubegraph stopped")
        self._running = False


def _kubegraph_version() -> str:
    from kubegraph import __version__

    return __version__


# ---------------------------------------------------------------------------
# Async entrypoint
# ---------------------------------------------------------------------------


async def main(config: KubeGraphConfig | None = None) -> None:
    """Create the app, register OS signals, run until shutdown is requested."""
    app = KubeGraphApp(config)
    loop = asyncio.get_running_loop()

    shutdown_triggered = False

    def _request_shutdown() -> None:
        nonlocal shutdown_triggered
        if shutdown_triggered:
            return
        shutdown_triggered = True
        asyncio.create_task(app.stop(), name="shutdown")

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, _request_shutdown)

    try:
        await app.start()
        while app._running:
            await asyncio.sleep(1)
    except _ComponentError as exc:
        log = get_logger("app")
        log.critical(
            "fatal startup error",
            component=exc.component,
            error=str(exc.cause),
        )
        await app.stop()
        raise SystemExit(1) from exc
    finally:
        if app._running:
            await app.stop()
