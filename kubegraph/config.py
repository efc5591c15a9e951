"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubegraph.models.config import (
    APIConfig,
    GraphSourceConfig,
    KubeGraphConfig,
    LayoutConfig,
    LogConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEGRAPH_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_direction(value: str) -> str:
    valid = {"LR", "TB"}
    if value.upper() not in valid:
        raise ValueError(f"Invalid layout direction: {value}. Must be one of {valid}")
    return value.upper()


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> KubeGraphConfig:
    """Load configuration from KUBEGRAPH_* environment variables."""
    return KubeGraphConfig(
        layout=LayoutConfig(
            direction=_validate_direction(_env("LAYOUT_DIRECTION", "LR")),
            node_width=_env_int("NODE_WIDTH", 260, min_val=40, max_val=1000),
            node_height=_env_int("NODE_HEIGHT", 90, min_val=20, max_val=600),
            node_sep=_env_int("NODE_SEP", 40, min_val=0, max_val=500),
            rank_sep=_env_int("RANK_SEP", 80, min_val=0, max_val=1000),
            margin=_env_int("MARGIN", 100, min_val=0, max_val=1000),
        ),
        source=GraphSourceConfig(
            graph_file=_env("GRAPH_FILE", ""),
        ),
        api=APIConfig(
            port=_env_int("API_PORT", 8080, min_val=1024, max_val=65535),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
