"""CLI for outline-mindmap (parse, outline, show)."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from outline_mindmap.config import DEFAULT_POLICY, HORIZONTAL_SPACING, VERTICAL_SPACING, LayoutSettings
from outline_mindmap.core.tree.builder import parse_mind_map
from outline_mindmap.core.tree.markdown import render_tree_as_outline
from outline_mindmap.core.tree.navigation import find_node, get_breadcrumbs, to_graph
from outline_mindmap.core.tree.serialize import dumps_json
from outline_mindmap.logging_config import configure_logging

app = typer.Typer(help="Turn heading outlines into positioned mind map trees.")

SourceArg = Annotated[str, typer.Argument(help="Outline file, or '-' for stdin")]
PolicyOpt = Annotated[
    str,
    typer.Option("--policy", "-p", envvar="OUTLINE_MINDMAP_POLICY", help="index or anchored"),
]
XSpacingOpt = Annotated[
    float,
    typer.Option("--x-spacing", envvar="OUTLINE_MINDMAP_X_SPACING", help="Horizontal spacing"),
]
YSpacingOpt = Annotated[
    float,
    typer.Option("--y-spacing", envvar="OUTLINE_MINDMAP_Y_SPACING", help="Vertical spacing"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _read_source(source: str) -> str:
    """Read outline text from a file path or stdin, exiting if the file is missing."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.is_file():
        logger.error("Outline file not found: {}", path)
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _settings(policy: str, x_spacing: float, y_spacing: float) -> LayoutSettings:
    try:
        return LayoutSettings(horizontal_spacing=x_spacing, vertical_spacing=y_spacing, policy=policy)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


@app.command()
def parse(
    source: SourceArg,
    policy: PolicyOpt = DEFAULT_POLICY,
    x_spacing: XSpacingOpt = HORIZONTAL_SPACING,
    y_spacing: YSpacingOpt = VERTICAL_SPACING,
    graph: bool = typer.Option(False, "--graph", "-g", help="Output flat nodes and edges"),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Parse an outline and print the positioned tree as JSON."""
    settings = _settings(policy, x_spacing, y_spacing)
    root = parse_mind_map(_read_source(source), settings=settings)
    data = to_graph(root).to_dict() if graph else root.to_dict()
    typer.echo(dumps_json(data, indent=indent or None))


@app.command()
def outline(
    source: SourceArg,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
    colors: bool = typer.Option(True, "--colors/--no-colors", help="Write color tags"),
    edge_labels: bool = typer.Option(
        True, "--edge-labels/--no-edge-labels", help="Write edge label annotations"
    ),
) -> None:
    """Print the outline normalized from its parsed tree."""
    root = parse_mind_map(_read_source(source))
    typer.echo(
        render_tree_as_outline(
            root, max_depth=max_depth, include_colors=colors, include_edge_labels=edge_labels
        ),
        nl=False,
    )


@app.command()
def show(
    node_id: str = typer.Argument(..., help="Node ID to show"),
    source: SourceArg = "-",
    policy: PolicyOpt = DEFAULT_POLICY,
    x_spacing: XSpacingOpt = HORIZONTAL_SPACING,
    y_spacing: YSpacingOpt = VERTICAL_SPACING,
) -> None:
    """Show a single node with its position and breadcrumbs."""
    settings = _settings(policy, x_spacing, y_spacing)
    root = parse_mind_map(_read_source(source), settings=settings)
    node = find_node(root, node_id)
    if node is None:
        typer.echo(f"Node '{node_id}' not found.")
        raise typer.Exit(1)

    crumbs = get_breadcrumbs(root, node_id)
    if crumbs:
        typer.echo(" > ".join(c.label for c in crumbs))
    typer.echo(f"{node.label}  [{node.color}]  id={node.id}")
    typer.echo(f"  position=({node.position.x:g}, {node.position.y:g})  depth={node.depth}")
    if node.edge_label is not None:
        typer.echo(f"  edge: {node.edge_label}")
    for child in node.children:
        typer.echo(f"  - {child.label}  id={child.id}")
