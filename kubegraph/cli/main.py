"""kubegraph command-line interface.

Commands:
    layout   -- print the laid-out scene of a graph document as JSON.
    details  -- print the detail panel content of one node as JSON.
    serve    -- run the REST API.

FILE arguments are JSON graph documents; the built-in demo graph is used
when FILE is omitted.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import replace

import click
from pydantic import ValidationError

from kubegraph import __version__
from kubegraph.api.schemas import DetailsResponse, SceneResponse
from kubegraph.config import load_config
from kubegraph.errors import GraphValidationError
from kubegraph.graph.model import GraphModel
from kubegraph.models.layout import Direction, LayoutOptions

_EXIT_UNKNOWN_NODE = 1
_EXIT_INVALID_GRAPH = 2


def _load(path: str | None) -> GraphModel:
    """Load *path* or the demo graph, turning input errors into click exits."""
    try:
        if path is None:
            from kubegraph.demo import demo_graph

            return demo_graph()
        from kubegraph.graph.schema import load_graph_file

        return load_graph_file(path)
    except (GraphValidationError, ValidationError, json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(_EXIT_INVALID_GRAPH) from exc


def _dump(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__, prog_name="kubegraph")
def cli() -> None:
    """Lay out and inspect Kubernetes resource graphs."""


@cli.command()
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--direction",
    type=click.Choice([d.value for d in Direction], case_sensitive=False),
    default=Direction.LEFT_TO_RIGHT.value,
    show_default=True,
    help="Rank axis: LR (left to right) or TB (top to bottom).",
)
def layout(file: str | None, direction: str) -> None:
    """Print the scene for FILE as JSON."""
    from kubegraph.layout.engine import compute_layout
    from kubegraph.selection.state import SelectionState
    from kubegraph.viewport.composer import compose_scene

    graph = _load(file)
    result = compute_layout(graph, LayoutOptions(direction=Direction(direction.upper())))
    if result.degraded is not None:
        click.echo(f"warning: {result.degraded.message}", err=True)
    scene = compose_scene(result, SelectionState())
    _dump(SceneResponse.model_validate(scene).model_dump(mode="json"))


@cli.command()
@click.argument("node_id")
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False))
def details(node_id: str, file: str | None) -> None:
    """Print the detail panel content of NODE_ID."""
    from kubegraph.detail.resolver import resolve_details

    graph = _load(file)
    node = graph.get(node_id)
    if node is None:
        click.echo(f"error: node '{node_id}' is not part of the graph", err=True)
        raise SystemExit(_EXIT_UNKNOWN_NODE)
    _dump(DetailsResponse.model_validate(resolve_details(node)).model_dump(mode="json"))


@cli.command()
@click.option("--port", type=int, default=None, help="Override KUBEGRAPH_API_PORT.")
@click.option("--graph-file", type=click.Path(exists=True, dir_okay=False), default=None)
def serve(port: int | None, graph_file: str | None) -> None:
    """Run the REST API until interrupted."""
    from kubegraph.app import main

    config = load_config()
    if port is not None:
        config.api = replace(config.api, port=port)
    if graph_file is not None:
        config.source = replace(config.source, graph_file=graph_file)
    asyncio.run(main(config))
