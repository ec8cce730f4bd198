"""Data models for agent discovery.

``AgentRecord`` is what the discovery layer hands to the graph builder;
``DiscoveryResult`` aggregates a whole discovery pass, including the files
that failed to parse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class AgentRecord:
    """A parsed agent definition.

    Attributes:
        name: Agent name from the frontmatter.
        description: Agent description from the frontmatter.
        version: Declared version, empty when absent. Not validated.
        dependencies: Names of agents this one depends on, in order.
        author: Author name or email, if declared.
        tags: Free-form tags.
        source_path: File the agent was parsed from.
        source: Discovery source ("project", "user" or "plugin").
        content: Markdown body after the frontmatter.
    """

    name: str
    description: str
    version: str = ""
    dependencies: list[str] = field(default_factory=list)
    author: str = ""
    tags: list[str] = field(default_factory=list)
    source_path: Path | None = None
    source: str = "project"
    content: str = ""


@dataclass(frozen=True)
class DiscoveryError:
    """A file or search path that could not be processed."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class DiscoveryResult:
    """Complete result of a discovery pass.

    Attributes:
        agents: Successfully parsed agents, first-found wins per name.
        errors: One entry per file or path that failed.
        time_taken: Wall-clock seconds spent discovering.
    """

    agents: list[AgentRecord] = field(default_factory=list)
    errors: list[DiscoveryError] = field(default_factory=list)
    time_taken: float = 0.0

    @property
    def total(self) -> int:
        return len(self.agents)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def is_empty(self) -> bool:
        return not self.agents

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
