"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LayoutConfig:
    """Layered layout geometry."""

    direction: str = "LR"
    node_width: int = 260
    node_height: int = 90
    node_sep: int = 40
    rank_sep: int = 80
    margin: int = 100


@dataclass
class GraphSourceConfig:
    """Where the served graph snapshot comes from."""

    graph_file: str = ""  # empty -> built-in demo graph


@dataclass
class APIConfig:
    """REST API configuration."""

    port: int = 8080


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"  # json | console


@dataclass
class KubeGraphConfig:
    """Top-level kubegraph configuration."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    source: GraphSourceConfig = field(default_factory=GraphSourceConfig)
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)
