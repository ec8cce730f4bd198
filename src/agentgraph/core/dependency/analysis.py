"""Aggregate statistics over an agent dependency graph.

Depth and connectivity are computed with stack-based DFS. Both are
cycle-tolerant: a node met again on the current path contributes depth 0
rather than raising, unlike the resolver.

``disconnected_nodes`` is produced by sweeping connected components in both
edge directions from every unmarked node. Every node ends up marked by some
sweep, so the value is always 0 for any input.
"""

from __future__ import annotations

from dataclasses import dataclass

from agentgraph.core.dependency.cycles import detect_cycles
from agentgraph.core.dependency.graph import DependencyGraph


@dataclass(frozen=True)
class GraphSummary:
    """Summary statistics for a dependency graph.

    Attributes:
        total_nodes: Number of agent nodes.
        total_edges: Number of dependency edges, dangling ones included.
        max_depth: Longest dependency chain length over all nodes.
        circular_dependency_count: Number of distinct cycles.
        disconnected_nodes: Nodes left unmarked by the connectivity sweep.
    """

    total_nodes: int = 0
    total_edges: int = 0
    max_depth: int = 0
    circular_dependency_count: int = 0
    disconnected_nodes: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_nodes": self.total_nodes,
            "total_edges": self.total_edges,
            "max_depth": self.max_depth,
            "circular_dependency_count": self.circular_dependency_count,
            "disconnected_nodes": self.disconnected_nodes,
        }


def calculate_depth(
    graph: DependencyGraph, name: str, on_path: set[str] | None = None
) -> int:
    """Return the longest dependency chain below ``name``.

    0 for a node with no outgoing edges or a node already on the current
    path. Each dependency's depth is recomputed independently; there is no
    memoization across siblings. The walk keeps its own frame stack, one
    ``[name, dependency iterator, best depth]`` entry per path node.
    """
    if on_path is None:
        on_path = set()
    if name in on_path:
        return 0

    on_path.add(name)
    stack: list[list] = [[name, iter(graph.edges.get(name, [])), 0]]
    depth = 0
    while stack:
        frame = stack[-1]
        dep = next(frame[1], None)
        if dep is None:
            stack.pop()
            on_path.discard(frame[0])
            if stack:
                stack[-1][2] = max(stack[-1][2], 1 + frame[2])
            else:
                depth = frame[2]
            continue
        if dep in on_path:
            frame[2] = max(frame[2], 1)
            continue
        on_path.add(dep)
        stack.append([dep, iter(graph.edges.get(dep, [])), 0])
    return depth


def mark_connected(graph: DependencyGraph, name: str, visited: set[str]) -> None:
    """Mark every node connected to ``name`` through edges in either direction."""
    dependents: dict[str, list[str]] = {}
    for source, deps in graph.edges.items():
        for dep in deps:
            dependents.setdefault(dep, []).append(source)

    pending = [name]
    while pending:
        current = pending.pop()
        if current in visited:
            continue
        visited.add(current)
        pending.extend(graph.edges.get(current, []))
        pending.extend(dependents.get(current, []))


def summarize(graph: DependencyGraph) -> GraphSummary:
    """Compute node/edge counts, max depth, cycle count and disconnected nodes."""
    max_depth = 0
    for name in graph.names():
        max_depth = max(max_depth, calculate_depth(graph, name))

    visited: set[str] = set()
    for name in graph.names():
        if name not in visited:
            mark_connected(graph, name, visited)
    marked = sum(1 for name in graph.agents if name in visited)

    return GraphSummary(
        total_nodes=graph.agent_count,
        total_edges=graph.edge_count,
        max_depth=max_depth,
        circular_dependency_count=len(detect_cycles(graph)),
        disconnected_nodes=graph.agent_count - marked,
    )
