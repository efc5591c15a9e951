"""structlog setup for kubegraph.

Server processes log JSON lines to stderr; ``fmt="console"`` switches to the
human-readable dev renderer for local runs.  Loggers are bound with the
service and component names so every event can be traced to its emitter.
"""

from __future__ import annotations

import logging
import sys

import structlog

_SERVICE = "kubegraph"


def _renderer(fmt: str) -> structlog.typing.Processor:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog with level filtering and the chosen renderer."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Logger bound with the service and *component* names."""
    return structlog.get_logger(service=_SERVICE, component=component)  # type: ignore[return-value]
