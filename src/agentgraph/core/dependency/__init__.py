"""Agent dependency graph, cycle detection, resolution and statistics.

All public names are re-exported here so callers can write
``from agentgraph.core.dependency import DependencyGraph``.

Submodules:

- ``graph``: ``AgentNode``, ``DependencyGraph`` and graph construction.
- ``cycles``: DFS cycle detection.
- ``resolver``: topological execution order and transitive closure.
- ``analysis``: ``GraphSummary`` statistics.
"""

from agentgraph.core.dependency.analysis import (
    GraphSummary,
    calculate_depth,
    mark_connected,
    summarize,
)
from agentgraph.core.dependency.cycles import (
    detect_cycles,
    find_cycle,
    has_cycle,
)
from agentgraph.core.dependency.graph import (
    AgentNode,
    DanglingDependency,
    DependencyGraph,
    DiscoveryBatch,
    build_graph_from_discovery,
)
from agentgraph.core.dependency.resolver import (
    DependencyResolver,
    ResolvedDependency,
    resolve_dependencies,
    transitive_dependencies,
)

__all__ = [
    "AgentNode",
    "DanglingDependency",
    "DependencyGraph",
    "DependencyResolver",
    "DiscoveryBatch",
    "GraphSummary",
    "ResolvedDependency",
    "build_graph_from_discovery",
    "calculate_depth",
    "detect_cycles",
    "find_cycle",
    "has_cycle",
    "mark_connected",
    "resolve_dependencies",
    "summarize",
    "transitive_dependencies",
]
