"""agentgraph CLI: Agent dependency graphs and execution order.

Entry point for the ``agentgraph`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    graph:    Render the dependency graph (text, json, graphviz).
    resolve:  Show the execution order for one agent.
    check:    Report dangling and circular dependencies.

Usage::

    agentgraph graph                          # Current project, text tree
    agentgraph graph ./project -f graphviz    # DOT output
    agentgraph resolve reviewer --transitive
    agentgraph check ./project
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from agentgraph import __version__
from agentgraph.cli.check_cmd import check_command
from agentgraph.cli.graph_cmd import graph_command
from agentgraph.cli.output import err_console
from agentgraph.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """agentgraph: Dependency graphs for declarative agent definitions.

    Discovers agent files (Markdown with YAML frontmatter), builds their
    dependency graph, and reports execution order, cycles and statistics.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# Register all subcommands
cli.add_command(graph_command)
cli.add_command(resolve_command)
cli.add_command(check_command)
