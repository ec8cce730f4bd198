"""Execution-order resolution and transitive closure for agent dependencies.

``DependencyResolver.resolve`` returns a topological order restricted to
the subgraph reachable from the requested agent. It is cycle-intolerant:
a back edge raises ``CircularDependencyError`` and a missing dependency
raises ``AgentNotFoundError``.

``DependencyResolver.transitive_dependencies`` is more permissive. It
tolerates cycles and dangling names and always terminates, so it can be
called without a prior cycle check.

Determinism
-----------
For a fixed graph the order is fully determined by declaration order:
dependencies are visited first-declared-first, and a node shared by several
parents appears once, at the position of its first resolution.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from agentgraph.core.dependency.graph import AgentNode, DependencyGraph
from agentgraph.exceptions import AgentNotFoundError, CircularDependencyError


@dataclass(frozen=True)
class ResolvedDependency:
    """One entry of a resolution order, numbered from 1.

    Attributes:
        name: Agent name.
        version: Agent version, empty when undeclared.
        order: 1-based position in the execution order.
    """

    name: str
    version: str
    order: int

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"name": self.name, "order": self.order}
        if self.version:
            data["version"] = self.version
        return data


class DependencyResolver:
    """Resolves execution order and transitive dependencies on a graph.

    The resolver never mutates the graph. Errors raised by one query leave
    it intact for the next.

    Args:
        graph: The dependency graph to query.
    """

    def __init__(self, graph: DependencyGraph) -> None:
        self._graph = graph

    def resolve(self, name: str) -> list[AgentNode]:
        """Return the agents that must run before ``name``, then ``name``.

        The walk is an iterative post-order DFS over an explicit stack of
        ``(name, dependency iterator)`` frames, so chain length is not
        bounded by the interpreter's recursion limit.

        Args:
            name: Agent to resolve.

        Returns:
            Agent nodes in execution order; every dependency precedes its
            dependents and ``name`` is last.

        Raises:
            AgentNotFoundError: If ``name`` or any reachable dependency has
                no node in the graph.
            CircularDependencyError: If a cycle is reachable from ``name``.
        """
        agents = self._graph.agents
        if name not in agents:
            raise AgentNotFoundError(name)

        ordered: list[AgentNode] = []
        emitted: set[str] = set()
        # Active call chain, as a list for cycle slicing and a set for lookup.
        visiting: list[str] = [name]
        on_path: set[str] = {name}
        stack: list[tuple[str, Iterator[str]]] = [(name, self._deps(name))]

        while stack:
            current, deps = stack[-1]
            dep = next(deps, None)
            if dep is None:
                stack.pop()
                visiting.pop()
                on_path.discard(current)
                emitted.add(current)
                ordered.append(agents[current])
                continue
            if dep in emitted:
                continue
            if dep in on_path:
                raise CircularDependencyError(visiting[visiting.index(dep):])
            if dep not in agents:
                raise AgentNotFoundError(dep, required_by=current)
            visiting.append(dep)
            on_path.add(dep)
            stack.append((dep, self._deps(dep)))

        return ordered

    def _deps(self, name: str) -> Iterator[str]:
        return iter(self._graph.edges.get(name, []))

    def resolve_numbered(self, name: str) -> list[ResolvedDependency]:
        """Like ``resolve`` but returns numbered name/version records."""
        return [
            ResolvedDependency(name=node.name, version=node.version, order=i)
            for i, node in enumerate(self.resolve(name), start=1)
        ]

    def transitive_dependencies(self, name: str) -> list[str]:
        """Return every name reachable from ``name``, excluding ``name``.

        Each name appears once, in DFS discovery order. Dangling names are
        included but not expanded. Terminates on cyclic graphs and on chains
        of any length.

        Raises:
            AgentNotFoundError: If ``name`` has no node in the graph.
        """
        if name not in self._graph.agents:
            raise AgentNotFoundError(name)

        visited: set[str] = {name}
        found: list[str] = []
        stack: list[Iterator[str]] = [self._deps(name)]

        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                stack.pop()
                continue
            if dep in visited:
                continue
            visited.add(dep)
            found.append(dep)
            stack.append(self._deps(dep))

        return found


def resolve_dependencies(graph: DependencyGraph, name: str) -> list[AgentNode]:
    """Shorthand for ``DependencyResolver(graph).resolve(name)``."""
    return DependencyResolver(graph).resolve(name)


def transitive_dependencies(graph: DependencyGraph, name: str) -> list[str]:
    """Shorthand for ``DependencyResolver(graph).transitive_dependencies(name)``."""
    return DependencyResolver(graph).transitive_dependencies(name)
