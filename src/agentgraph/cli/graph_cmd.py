"""``agentgraph graph [path]``: Render the agent dependency graph.

Discovers agents, builds the dependency graph and renders it as a text
tree, JSON or Graphviz DOT, followed by summary statistics.

Exit Codes:
    0: Graph rendered.
    2: No agents found, invalid configuration or unsupported format.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from agentgraph.cli.common import load_graph
from agentgraph.cli.output import (
    print_cycles,
    print_discovery_errors,
    print_error,
    print_graph_summary,
)
from agentgraph.core.render import RenderOptions, render_graph
from agentgraph.exceptions import UnsupportedFormatError


@click.command("graph")
@click.argument("path", type=click.Path(exists=True, file_okay=False), default=".")
@click.option(
    "--format", "-f", "output_format",
    default="text",
    help="Output format: text, json or graphviz (default: text).",
)
@click.option(
    "--max-depth", type=click.IntRange(min=0), default=0,
    help="Maximum text tree depth (default: unlimited).",
)
@click.option("--include-versions", is_flag=True, help="Show agent versions.")
@click.option("--highlight-cycles", is_flag=True, help="Detect and list circular dependencies.")
@click.option(
    "--output", "-o", type=click.Path(), default=None,
    help="Write the rendered graph to a file instead of stdout.",
)
def graph_command(
    path: str,
    output_format: str,
    max_depth: int,
    include_versions: bool,
    highlight_cycles: bool,
    output: str | None,
) -> None:
    """Render the dependency graph of all agents found in PATH.

    With --format json the full result (graph, summary, cycles) is printed
    as a single JSON document.
    """
    result, graph = load_graph(path)
    options = RenderOptions(
        max_depth=max_depth,
        include_versions=include_versions,
        highlight_cycles=highlight_cycles,
    )
    try:
        rendered = render_graph(graph, output_format, options)
    except UnsupportedFormatError as exc:
        print_error(str(exc))
        sys.exit(2)

    if output:
        Path(output).write_text(rendered.graph_data, encoding="utf-8")
        click.echo(f"Graph written to: {output}")
    elif rendered.format == "json":
        click.echo(json.dumps(rendered.to_dict(), indent=2))
        sys.exit(0)
    else:
        click.echo(rendered.graph_data, nl=False)

    print_graph_summary(rendered.summary)
    if highlight_cycles:
        print_cycles(rendered.cycles)
    print_discovery_errors(result.errors)
    sys.exit(0)
