"""agentgraph exception hierarchy.

All public exceptions inherit from AgentGraphError, giving callers a single
base class to catch when they want to handle any agentgraph-specific failure
without swallowing unrelated errors.

Query errors (``AgentNotFoundError``, ``CircularDependencyError``) are scoped
to the call that raised them. They never leave the dependency graph in a
modified state, so the same graph can serve later queries.
"""

from __future__ import annotations


class AgentGraphError(Exception):
    """Base exception for all agentgraph errors."""


class AgentNotFoundError(AgentGraphError):
    """Raised when a requested or declared agent is absent from the graph.

    Attributes:
        name: The agent name that could not be found.
        required_by: The agent that declared ``name`` as a dependency, or
            None when ``name`` was requested directly.
    """

    def __init__(self, name: str, required_by: str | None = None) -> None:
        self.name = name
        self.required_by = required_by
        if required_by is None:
            message = f"agent {name!r} not found in graph"
        else:
            message = (
                f"agent {name!r} not found in graph "
                f"(required by {required_by!r})"
            )
        super().__init__(message)


class CircularDependencyError(AgentGraphError):
    """Raised when a cycle-intolerant walk meets a back edge.

    Attributes:
        cycle: Agent names on the offending loop, in traversal order.
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        loop = " -> ".join(self.cycle + self.cycle[:1])
        super().__init__(
            f"circular dependency detected involving agent "
            f"{self.cycle[0]!r}: {loop}"
        )


class UnsupportedFormatError(AgentGraphError):
    """Raised when a render is requested in an unknown output format.

    Attributes:
        format: The rejected format name.
        supported: The format names that are accepted.
    """

    def __init__(self, format: str, supported: tuple[str, ...]) -> None:
        self.format = format
        self.supported = supported
        super().__init__(
            f"unsupported format: {format!r} "
            f"(expected one of: {', '.join(supported)})"
        )


class InvalidAgentError(AgentGraphError):
    """Raised when an agent node cannot be registered in a graph."""


class ParseError(AgentGraphError):
    """Raised when an agent definition file cannot be parsed.

    Covers missing or unterminated frontmatter, invalid YAML, missing
    required fields and malformed dependency lists.
    """


class ConfigError(AgentGraphError):
    """Raised for unreadable or invalid discovery configuration."""
