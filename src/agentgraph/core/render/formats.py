"""Text tree, JSON and Graphviz DOT renderers for dependency graphs.

All renderers are pure functions of the graph. Agents are emitted in sorted
name order and each agent's edges in declaration order, so rendering the
same graph twice gives byte-identical output.
"""

from __future__ import annotations

import json

from agentgraph.core.dependency.analysis import summarize
from agentgraph.core.dependency.cycles import detect_cycles
from agentgraph.core.dependency.graph import DependencyGraph
from agentgraph.core.render.models import (
    GraphData,
    GraphEdgeRecord,
    GraphNodeRecord,
    RenderOptions,
    RenderResult,
)
from agentgraph.exceptions import UnsupportedFormatError

SUPPORTED_FORMATS: tuple[str, ...] = ("text", "json", "graphviz")

_BRANCH = "└── "
_INDENT = "    "


# ---------------------------------------------------------------------------
# Text tree
# ---------------------------------------------------------------------------


def render_text(
    graph: DependencyGraph,
    max_depth: int = 0,
    include_versions: bool = False,
) -> str:
    """Render the graph as an indented dependency tree.

    Each agent not yet shown starts a new root block. A visited-set shared
    by the whole pass means a node is fully expanded only once, under the
    first parent that reaches it; later occurrences (true cycles and shared
    dependencies alike) are written as ``"<name> (circular)"``.

    Args:
        graph: The graph to render.
        max_depth: Stop at this depth (roots are depth 0); 0 is unlimited.
        include_versions: Append ``" (<version>)"`` when one is declared.
    """
    lines: list[str] = []
    visited: set[str] = set()
    for name in graph.names():
        if name not in visited:
            _render_tree(graph, name, max_depth, visited, include_versions, lines)
            lines.append("")
    return "".join(line + "\n" for line in lines)


def _render_tree(
    graph: DependencyGraph,
    root: str,
    max_depth: int,
    visited: set[str],
    include_versions: bool,
    lines: list[str],
) -> None:
    # Children are pushed in reverse so they pop in declaration order.
    pending: list[tuple[str, str, int]] = [(root, "", 0)]
    while pending:
        name, prefix, depth = pending.pop()
        if max_depth > 0 and depth >= max_depth:
            continue

        if name in visited:
            lines.append(f"{prefix}{_BRANCH}{name} (circular)")
            continue
        visited.add(name)

        label = name
        if include_versions:
            node = graph.get_agent(name)
            if node is not None and node.version:
                label = f"{name} ({node.version})"
        lines.append(f"{prefix}{_BRANCH}{label}")

        for dep in reversed(graph.edges.get(name, [])):
            pending.append((dep, prefix + _INDENT, depth + 1))


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def build_graph_data(graph: DependencyGraph) -> GraphData:
    """Flatten the graph into node and edge records."""
    data = GraphData()
    for node in graph.sorted_agents():
        data.nodes.append(
            GraphNodeRecord(id=node.name, name=node.name, version=node.version)
        )
    for source in sorted(graph.edges):
        for target in graph.edges[source]:
            data.edges.append(GraphEdgeRecord(from_name=source, to_name=target))
    return data


def render_json(graph: DependencyGraph) -> str:
    """Render the graph as an indented JSON document."""
    return json.dumps(build_graph_data(graph).to_dict(), indent=2)


# ---------------------------------------------------------------------------
# Graphviz DOT
# ---------------------------------------------------------------------------


def _dot_quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def render_graphviz(graph: DependencyGraph, include_versions: bool = False) -> str:
    """Render the graph in Graphviz DOT format."""
    out = ["digraph {"]
    for node in graph.sorted_agents():
        name = _dot_quote(node.name)
        if include_versions and node.version:
            label = f"{name}\\n{_dot_quote(node.version)}"
        else:
            label = name
        out.append(f'  "{name}" [label="{label}"];')

    for source in sorted(graph.edges):
        for target in graph.edges[source]:
            out.append(f'  "{_dot_quote(source)}" -> "{_dot_quote(target)}";')

    out.append("}")
    return "\n".join(out) + "\n"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def render_graph(
    graph: DependencyGraph,
    format: str = "text",
    options: RenderOptions | None = None,
) -> RenderResult:
    """Render a graph in the requested format with its summary.

    Args:
        graph: The graph to render.
        format: One of ``text``, ``json`` or ``graphviz``. Empty means text.
        options: Rendering options; defaults to ``RenderOptions()``.

    Returns:
        A ``RenderResult`` with the rendered text, summary and (if
        requested) detected cycles.

    Raises:
        UnsupportedFormatError: If ``format`` is not supported. Nothing is
            rendered in that case.
    """
    fmt = format or "text"
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(fmt, SUPPORTED_FORMATS)
    opts = options or RenderOptions()

    json_data: GraphData | None = None
    if fmt == "graphviz":
        graph_data = render_graphviz(graph, opts.include_versions)
    elif fmt == "json":
        json_data = build_graph_data(graph)
        graph_data = json.dumps(json_data.to_dict(), indent=2)
    else:
        graph_data = render_text(graph, opts.max_depth, opts.include_versions)

    return RenderResult(
        format=fmt,
        graph_data=graph_data,
        summary=summarize(graph),
        json_data=json_data,
        cycles=detect_cycles(graph) if opts.highlight_cycles else [],
    )
