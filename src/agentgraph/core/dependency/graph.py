"""Agent dependency graph data structure and construction.

The graph is a plain adjacency map keyed by agent name: ``agents`` maps each
name to its ``AgentNode`` and ``edges`` maps each name to the ordered list of
names it depends on. Edges may point at names with no node (dangling
dependencies); they are kept so they can be reported later.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from agentgraph.exceptions import InvalidAgentError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AgentNode: A vertex in the graph
# ---------------------------------------------------------------------------


@dataclass
class AgentNode:
    """A node in the dependency graph.

    Attributes:
        name: Unique agent name, the graph key.
        version: Free-form version string. Empty when undeclared.
        dependencies: Names of the agents this one depends on, in
            declaration order.
        description: Short human-readable summary.
        source_path: File the agent was discovered in, if any.
    """

    name: str
    version: str = ""
    dependencies: list[str] = field(default_factory=list)
    description: str = ""
    source_path: Path | None = None


@dataclass(frozen=True)
class DanglingDependency:
    """A declared dependency that has no node in the graph."""

    agent: str
    dependency: str

    def __str__(self) -> str:
        return f"{self.agent} -> {self.dependency}"


class AgentRecordLike(Protocol):
    """Anything the discovery layer hands over: name, version, dependencies."""

    name: str
    version: str
    dependencies: list[str]


@runtime_checkable
class DiscoveryBatch(Protocol):
    """A discovery result: the parsed agents plus a count of failed files."""

    @property
    def agents(self) -> list[AgentRecordLike]: ...

    @property
    def error_count(self) -> int: ...


# ---------------------------------------------------------------------------
# DependencyGraph
# ---------------------------------------------------------------------------


class DependencyGraph:
    """Directed graph of agent dependencies.

    An edge ``a -> b`` means agent ``a`` depends on ``b``, so ``b`` must be
    ordered before ``a``. The adjacency lists never hold a duplicate pair.

    A graph is built once per discovery pass and only read afterwards. This
    class is NOT thread-safe; external synchronization is required if a
    caller mutates it while other threads query it.
    """

    def __init__(self) -> None:
        self.agents: dict[str, AgentNode] = {}
        self.edges: dict[str, list[str]] = {}

    @property
    def agent_count(self) -> int:
        """Return the number of agent nodes."""
        return len(self.agents)

    @property
    def edge_count(self) -> int:
        """Return the number of dependency edges, dangling ones included."""
        return sum(len(deps) for deps in self.edges.values())

    def add_agent(self, node: AgentNode) -> None:
        """Register an agent node by name.

        If a node with the same name already exists it is replaced.

        Args:
            node: The ``AgentNode`` to add.

        Raises:
            InvalidAgentError: If the node has an empty name.
        """
        if not node.name:
            raise InvalidAgentError("agent name is empty")
        if node.name in self.agents:
            logger.debug("Replacing agent %r in graph", node.name)
        self.agents[node.name] = node
        self.edges.setdefault(node.name, [])

    def add_edge(self, from_name: str, to_name: str) -> None:
        """Record that ``from_name`` depends on ``to_name``.

        The pair is appended only once. Neither end has to exist as a node.
        """
        deps = self.edges.setdefault(from_name, [])
        if to_name not in deps:
            deps.append(to_name)

    def get_agent(self, name: str) -> AgentNode | None:
        """Return the node for ``name``, or None if absent."""
        return self.agents.get(name)

    def dependencies_of(self, name: str) -> list[str]:
        """Return the direct dependencies of ``name`` in declaration order."""
        return list(self.edges.get(name, []))

    def dependents_of(self, name: str) -> list[str]:
        """Return the agents that directly depend on ``name``, sorted."""
        return sorted(
            source for source, deps in self.edges.items() if name in deps
        )

    def names(self) -> list[str]:
        """Return all agent names sorted, the stable iteration order."""
        return sorted(self.agents)

    def sorted_agents(self) -> list[AgentNode]:
        """Return all agent nodes sorted by name."""
        return [self.agents[name] for name in self.names()]

    def dangling_dependencies(self) -> list[DanglingDependency]:
        """List every declared dependency that has no node.

        Never raises. Agents are visited in sorted order, dependencies in
        declaration order.
        """
        dangling: list[DanglingDependency] = []
        for name in sorted(self.edges):
            for dep in self.edges[name]:
                if dep not in self.agents:
                    dangling.append(DanglingDependency(agent=name, dependency=dep))
        return dangling

    def __str__(self) -> str:
        lines = [
            f"DependencyGraph: {self.agent_count} agents, {self.edge_count} edges"
        ]
        for name in self.names():
            lines.append(f"  {name}: depends on [{', '.join(self.edges[name])}]")
        return "\n".join(lines)


def build_graph_from_discovery(
    records: Iterable[AgentRecordLike] | DiscoveryBatch,
) -> DependencyGraph:
    """Build a dependency graph from discovered agent records.

    Every record becomes a node first; then, in record order, one edge is
    added per declared dependency, preserving declaration order. Unknown
    dependency names are kept as dangling edges.

    ``records`` may also be a ``DiscoveryBatch`` such as a
    ``DiscoveryResult``, exposing ``agents`` and ``error_count``. Only its successfully parsed agents are used; upstream
    parse failures never prevent the build.

    Args:
        records: Agent records, or a discovery result holding them.

    Returns:
        A new ``DependencyGraph``.
    """
    if isinstance(records, DiscoveryBatch):
        agents = list(records.agents)
        failed = records.error_count
    else:
        agents = list(records)
        failed = 0
    if failed:
        logger.warning(
            "Building graph from %d agents; %d agent files failed to parse",
            len(agents), failed,
        )

    graph = DependencyGraph()
    for record in agents:
        graph.add_agent(
            AgentNode(
                name=record.name,
                version=record.version or "",
                dependencies=list(record.dependencies),
                description=getattr(record, "description", ""),
                source_path=getattr(record, "source_path", None),
            )
        )

    for record in agents:
        for dep in record.dependencies:
            graph.add_edge(record.name, dep)

    logger.debug(
        "Built dependency graph: %d agents, %d edges",
        graph.agent_count, graph.edge_count,
    )
    return graph
