"""Serialized views of a dependency graph: text tree, JSON and Graphviz DOT."""

from agentgraph.core.render.formats import (
    SUPPORTED_FORMATS,
    build_graph_data,
    render_graph,
    render_graphviz,
    render_json,
    render_text,
)
from agentgraph.core.render.models import (
    GraphData,
    GraphEdgeRecord,
    GraphNodeRecord,
    RenderOptions,
    RenderResult,
)

__all__ = [
    "GraphData",
    "GraphEdgeRecord",
    "GraphNodeRecord",
    "RenderOptions",
    "RenderResult",
    "SUPPORTED_FORMATS",
    "build_graph_data",
    "render_graph",
    "render_graphviz",
    "render_json",
    "render_text",
]
