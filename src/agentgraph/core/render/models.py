"""Typed result structures for rendered dependency graphs.

These dataclasses are the serialization contract of the render layer. Each
exposes ``to_dict()`` with the JSON key names used on output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from agentgraph.core.dependency.analysis import GraphSummary


@dataclass(frozen=True)
class GraphNodeRecord:
    """A node in the JSON graph view."""

    id: str
    name: str
    version: str = ""

    def to_dict(self) -> dict[str, str]:
        data = {"id": self.id, "name": self.name}
        if self.version:
            data["version"] = self.version
        return data


@dataclass(frozen=True)
class GraphEdgeRecord:
    """A dependency edge in the JSON graph view."""

    from_name: str
    to_name: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.from_name, "to": self.to_name}


@dataclass
class GraphData:
    """Flattened node and edge lists of a graph."""

    nodes: list[GraphNodeRecord] = field(default_factory=list)
    edges: list[GraphEdgeRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


@dataclass(frozen=True)
class RenderOptions:
    """Options for ``render_graph``.

    Attributes:
        max_depth: Text tree depth limit; 0 means unlimited.
        include_versions: Show versions in text and Graphviz output.
        highlight_cycles: Detect cycles and attach them to the result.
    """

    max_depth: int = 0
    include_versions: bool = False
    highlight_cycles: bool = False


@dataclass
class RenderResult:
    """Output of ``render_graph``.

    Attributes:
        format: The format that was rendered.
        graph_data: The rendered text.
        summary: Graph statistics.
        json_data: Structured node/edge payload, only for ``json``.
        cycles: Detected cycles, only when ``highlight_cycles`` was set.
    """

    format: str
    graph_data: str
    summary: GraphSummary
    json_data: GraphData | None = None
    cycles: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "format": self.format,
            "graph_data": self.graph_data,
            "summary": self.summary.to_dict(),
            "cycles": [list(c) for c in self.cycles],
        }
        if self.json_data is not None:
            data["json_data"] = self.json_data.to_dict()
        return data
