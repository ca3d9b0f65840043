"""Search commands for the node search CLI."""

import json
from typing import List, Optional

import typer
from rich.table import Table

from cli.common import console, load_scene, logger
from scene import Node, Scene
from scene.nodesearch import QueryParser

app = typer.Typer(name="search", help="Query nodes in a scene snapshot")


def _print_nodes(scene: Scene, nodes: List[Node], title: str, as_json: bool) -> None:
    timeline = scene.get_timeline()

    if as_json:
        payload = []
        for node in nodes:
            data = node.to_dict()
            data["selected"] = node.selected
            data["timeline_index"] = node.timeline_index(timeline)
            payload.append(data)
        console.print_json(json.dumps(payload))
        return

    if not nodes:
        logger.info("No nodes matched.")
        return

    table = Table(title=title)
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Layer", style="green", justify="right")
    table.add_column("Selected", style="blue")

    for node in nodes:
        index = node.timeline_index(timeline)
        table.add_row(
            node.path,
            node.type,
            "" if index is None else str(index),
            "yes" if node.selected else "",
        )

    console.print(table)
    console.print(f"Total: {len(nodes)} node(s)")


@app.command("search")
def search(
    snapshot: str = typer.Argument(..., help="Path to a JSON scene snapshot"),
    query: str = typer.Argument(..., help="Node search query, e.g. 'Top/*#PEG'"),
    sort: bool = typer.Option(
        True, "--sort/--no-sort", help="Sort results by timeline index"
    ),
    regex_prefix: Optional[str] = typer.Option(
        None,
        "--regex-prefix",
        help="How 're:' terms are recognised: 'exact' or 'startswith'",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Search nodes in a scene snapshot."""
    scene = load_scene(snapshot, regex_prefix=regex_prefix)
    nodes = scene.node_search(query, sort_result=sort)
    _print_nodes(scene, nodes, f"Nodes matching {query}", as_json)


@app.command("selected")
def selected(
    snapshot: str = typer.Argument(..., help="Path to a JSON scene snapshot"),
    recurse: bool = typer.Option(
        False, "--recurse", "-r", help="Include the content of selected groups"
    ),
    sort: bool = typer.Option(
        False, "--sort/--no-sort", help="Sort results by timeline index"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """List the selected nodes of a scene snapshot."""
    scene = load_scene(snapshot)
    nodes = scene.get_selected_nodes(recurse=recurse, sort_result=sort)
    _print_nodes(scene, nodes, "Selected nodes", as_json)


@app.command("parse")
def parse(query: str = typer.Argument(..., help="Node search query to parse")):
    """Show how a query is parsed."""
    parsed = QueryParser().parse(query)
    console.print_json(json.dumps(parsed.to_dict()))
