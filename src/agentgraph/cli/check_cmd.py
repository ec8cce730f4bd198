"""``agentgraph check [path]``: Report dependency problems.

Lists dangling dependencies, circular dependencies and agent files that
failed to parse. Dangling dependencies are reported without attempting any
resolution.

Exit Codes:
    0: No problems found.
    1: At least one dangling dependency, cycle or parse failure.
    2: No agents found in the target path.
"""

from __future__ import annotations

import json
import sys

import click

from agentgraph.cli.common import load_graph
from agentgraph.cli.output import print_cycles, print_dangling, print_discovery_errors
from agentgraph.core.dependency import detect_cycles


@click.command("check")
@click.argument("path", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def check_command(path: str, as_json: bool) -> None:
    """Check the agents in PATH for dangling and circular dependencies."""
    result, graph = load_graph(path)
    dangling = graph.dangling_dependencies()
    cycles = detect_cycles(graph)

    if as_json:
        click.echo(json.dumps({
            "agents": graph.agent_count,
            "dangling_dependencies": [
                {"agent": d.agent, "dependency": d.dependency} for d in dangling
            ],
            "cycles": cycles,
            "parse_errors": [
                {"path": str(e.path), "message": e.message} for e in result.errors
            ],
        }, indent=2))
    else:
        print_dangling(dangling)
        print_cycles(cycles)
        print_discovery_errors(result.errors)

    has_issues = bool(dangling or cycles or result.errors)
    sys.exit(1 if has_issues else 0)
