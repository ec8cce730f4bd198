"""Discovery of agent definition files.

Supplies the agent records the dependency graph is built from.

Public API::

    from agentgraph.discovery import AgentDiscoverer

    result = AgentDiscoverer(Path(".")).discover_all()
    for agent in result.agents:
        print(agent.name, agent.dependencies)
"""

from __future__ import annotations

from agentgraph.discovery.discoverer import AgentDiscoverer
from agentgraph.discovery.models import AgentRecord, DiscoveryError, DiscoveryResult
from agentgraph.discovery.parser import parse_agent_file, parse_agent_text

__all__ = [
    "AgentDiscoverer",
    "AgentRecord",
    "DiscoveryError",
    "DiscoveryResult",
    "parse_agent_file",
    "parse_agent_text",
]
