"""Renderers that turn graph data into text formats."""

from workflow_viz.render.dot import escape_dot, render_dot
from workflow_viz.render.layout import assign_layers, layered_layout
from workflow_viz.render.summary import format_graph_summary
from workflow_viz.render.svg import escape_xml, render_svg

__all__ = [
    "escape_dot",
    "render_dot",
    "escape_xml",
    "render_svg",
    "assign_layers",
    "layered_layout",
    "format_graph_summary",
]
