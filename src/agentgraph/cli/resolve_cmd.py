"""``agentgraph resolve <name> [path]``: Show an agent's execution order.

Exit Codes:
    0: Dependencies resolved.
    1: Resolution failed (unknown agent, missing dependency or cycle).
    2: No agents found in the target path.
"""

from __future__ import annotations

import json
import sys

import click

from agentgraph.cli.common import load_graph
from agentgraph.cli.output import print_error, print_resolution
from agentgraph.core.dependency import DependencyResolver
from agentgraph.exceptions import AgentNotFoundError, CircularDependencyError


@click.command("resolve")
@click.argument("name")
@click.argument("path", type=click.Path(exists=True, file_okay=False), default=".")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["list", "tree", "json"]),
    default="list",
    help="Output format (default: list).",
)
@click.option("--transitive", is_flag=True, help="Also list all transitive dependencies.")
def resolve_command(name: str, path: str, output_format: str, transitive: bool) -> None:
    """Resolve the agents that must run before NAME, in execution order."""
    _, graph = load_graph(path)
    resolver = DependencyResolver(graph)

    try:
        deps = resolver.resolve_numbered(name)
    except (AgentNotFoundError, CircularDependencyError) as exc:
        if output_format == "json":
            click.echo(json.dumps({"agent_name": name, "error": str(exc)}, indent=2))
        else:
            print_error(f"dependency resolution failed: {exc}")
        sys.exit(1)

    transitive_deps = resolver.transitive_dependencies(name) if transitive else None

    if output_format == "json":
        data: dict[str, object] = {
            "agent_name": name,
            "dependencies": [d.to_dict() for d in deps],
        }
        if transitive_deps is not None:
            data["transitive_dependencies"] = transitive_deps
        click.echo(json.dumps(data, indent=2))
    else:
        print_resolution(output_format, name, deps, transitive_deps)
    sys.exit(0)
