"""Rich output formatting helpers for the agentgraph CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agentgraph.core.dependency import DanglingDependency, GraphSummary, ResolvedDependency
from agentgraph.discovery import DiscoveryError

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False, soft_wrap=True,
    )


def print_graph_summary(summary: GraphSummary) -> None:
    """Print graph statistics as a two-column table.

    Args:
        summary: Statistics from ``summarize``.
    """
    table = Table(title="Graph Summary", show_header=True, header_style="bold")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Agents", str(summary.total_nodes))
    table.add_row("Edges", str(summary.total_edges))
    table.add_row("Max depth", str(summary.max_depth))
    table.add_row("Cycles", str(summary.circular_dependency_count))
    table.add_row("Disconnected", str(summary.disconnected_nodes))
    console.print(table)


def print_cycles(cycles: list[list[str]]) -> None:
    """Print each detected cycle as ``a -> b -> a``."""
    if not cycles:
        console.print("[green]No circular dependencies.[/green]")
        return
    console.print(f"[bold red]{len(cycles)} circular dependencies:[/bold red]")
    for cycle in cycles:
        loop = " -> ".join(cycle + cycle[:1])
        console.print(f"  [red]- {escape(loop)}[/red]", highlight=False, soft_wrap=True)


def print_dangling(dangling: list[DanglingDependency]) -> None:
    """Print dependencies that have no matching agent."""
    if not dangling:
        console.print("[green]No dangling dependencies.[/green]")
        return
    table = Table(title="Dangling Dependencies", show_header=True, header_style="bold")
    table.add_column("Agent", style="bold")
    table.add_column("Missing dependency", style="yellow")
    for item in dangling:
        table.add_row(item.agent, item.dependency)
    console.print(table)


def print_discovery_errors(errors: list[DiscoveryError]) -> None:
    """Print files that failed to parse during discovery."""
    if not errors:
        return
    console.print(f"[yellow]{len(errors)} agent files could not be parsed:[/yellow]")
    for error in errors:
        console.print(
            f"  [yellow]- {escape(str(error))}[/yellow]",
            highlight=False, soft_wrap=True,
        )


def format_resolution(
    output_format: str, agent_name: str, deps: list[ResolvedDependency]
) -> str:
    """Format a resolution order as a list or a tree.

    The requested agent itself is left out of the listing.
    """
    lines: list[str] = []
    if output_format == "tree":
        lines.append(agent_name)
        for dep in deps:
            if dep.name == agent_name:
                continue
            version = f" (v{dep.version})" if dep.version else ""
            lines.append(f"  └─ {dep.name}{version}")
    else:
        lines.append(f"Dependencies for {agent_name} (execution order):")
        for dep in deps:
            if dep.name == agent_name:
                continue
            version = f" v{dep.version}" if dep.version else ""
            lines.append(f"{dep.order}. {dep.name}{version}")
    return "\n".join(lines)


def print_resolution(
    output_format: str,
    agent_name: str,
    deps: list[ResolvedDependency],
    transitive: list[str] | None = None,
) -> None:
    """Print a resolution order with an optional transitive dependency list."""
    header = Text.assemble(
        ("Agent: ", "bold"), (agent_name, ""),
        ("  Dependencies: ", "bold"), (str(len(deps) - 1), ""),
    )
    console.print(Panel(header, title="Dependency Resolution"))
    console.print(
        format_resolution(output_format, agent_name, deps),
        markup=False, highlight=False, soft_wrap=True,
    )
    if transitive is not None:
        console.print(
            f"[bold]Transitive dependencies:[/bold] {escape(', '.join(transitive) or '-')}",
            highlight=False, soft_wrap=True,
        )
