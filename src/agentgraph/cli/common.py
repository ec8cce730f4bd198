"""Shared discovery-and-build step for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from agentgraph.cli.output import print_error
from agentgraph.core.dependency import DependencyGraph, build_graph_from_discovery
from agentgraph.discovery import AgentDiscoverer, DiscoveryResult
from agentgraph.exceptions import ConfigError


def load_graph(path: str) -> tuple[DiscoveryResult, DependencyGraph]:
    """Discover agents under ``path`` and build their dependency graph.

    Exits with code 2 if the configuration is invalid or no agents are
    found.
    """
    discoverer = AgentDiscoverer(Path(path))
    try:
        result = discoverer.discover_all()
    except ConfigError as exc:
        print_error(str(exc))
        sys.exit(2)

    if result.is_empty:
        click.echo("No agents found in the target directory.")
        sys.exit(2)

    return result, build_graph_from_discovery(result)
