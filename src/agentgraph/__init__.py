"""agentgraph: Dependency graph construction and resolution for declarative agents."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
