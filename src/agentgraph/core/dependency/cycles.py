"""Directed cycle detection over the agent dependency graph.

Standard DFS colouring: ``visited`` holds fully explored nodes, ``on_stack``
the nodes on the active DFS path, and ``path`` the same nodes in order. A
dependency found on the stack closes a cycle.

``detect_cycles`` re-seeds the search from every node with fresh state so
that cycles unreachable from earlier start points are still found. Worst
case cost is O(V * (V + E)).
"""

from __future__ import annotations

from collections.abc import Iterator

from agentgraph.core.dependency.graph import DependencyGraph


def find_cycle(
    graph: DependencyGraph,
    start: str,
    visited: set[str],
    on_stack: set[str],
    path: list[str],
) -> list[str] | None:
    """Search depth-first from ``start`` for a cycle.

    Args:
        graph: The graph to search.
        start: Node to expand.
        visited: Fully explored nodes; updated in place.
        on_stack: Nodes on the current DFS path; updated in place.
        path: Current DFS path in order; updated in place.

    Returns:
        The cycle as the path slice from the re-entered node to the node
        that closes the loop (e.g. ``["a", "b"]`` for ``a -> b -> a``,
        ``["a"]`` for a self-loop), or None if no cycle is reachable.
    """
    visited.add(start)
    on_stack.add(start)
    path.append(start)
    stack: list[Iterator[str]] = [iter(graph.edges.get(start, []))]

    while stack:
        dep = next(stack[-1], None)
        if dep is None:
            stack.pop()
            on_stack.discard(path.pop())
            continue
        if dep in on_stack:
            return path[path.index(dep):]
        if dep not in visited:
            visited.add(dep)
            on_stack.add(dep)
            path.append(dep)
            stack.append(iter(graph.edges.get(dep, [])))

    return None


def _canonical(cycle: list[str]) -> tuple[str, ...]:
    """Rotate a cycle so it starts at its smallest name."""
    pivot = cycle.index(min(cycle))
    return tuple(cycle[pivot:] + cycle[:pivot])


def detect_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Find the distinct cycles reachable from every node.

    Each node, in sorted order, seeds a fresh search. Cycles that are
    rotations of one already found are not repeated.

    Returns:
        A list of cycles, each a list of agent names. Empty if acyclic.
    """
    cycles: list[list[str]] = []
    seen: set[tuple[str, ...]] = set()

    for name in graph.names():
        cycle = find_cycle(graph, name, set(), set(), [])
        if cycle is None:
            continue
        key = _canonical(cycle)
        if key not in seen:
            seen.add(key)
            cycles.append(cycle)

    return cycles


def has_cycle(graph: DependencyGraph) -> bool:
    """Return True if any directed cycle exists in the graph."""
    visited: set[str] = set()
    for name in graph.names():
        if name not in visited and find_cycle(graph, name, visited, set(), []):
            return True
    return False
