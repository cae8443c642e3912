"""Render graph data as a standalone inline SVG document."""

from __future__ import annotations

import re
from html import escape

from workflow_viz.graph.validation import validate_graph
from workflow_viz.models.graph_data import GraphData, GraphNode
from workflow_viz.render.layout import Point, layered_layout


NODE_RADIUS = 20
LABEL_OFFSET = 35

# code points outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

STYLE_BLOCK = """<style>
    .node-agent { fill: #4a90d9; }
    .node-start { fill: #27ae60; }
    .node-end { fill: #e74c3c; }
    .node-bottleneck { fill: #f39c12; }
    .edge { stroke: #999; stroke-width: 2; }
    .label { font-family: Arial; font-size: 12px; }
  </style>"""


def escape_xml(value: object) -> str:
    """Escape text for XML content and double-quoted attributes.

    Characters XML cannot represent are replaced with U+FFFD.
    """
    return escape(_XML_ILLEGAL.sub("\ufffd", str(value)), quote=True)


def _fmt(value: float) -> str:
    return f"{value:g}"


def node_class(node: GraphNode) -> str:
    """CSS class for a node: start, end, bottleneck, then plain agent."""
    if node.node_type == "start":
        return "node-start"
    if node.node_type == "end":
        return "node-end"
    if node.is_bottleneck:
        return "node-bottleneck"
    return "node-agent"


def render_svg(
    data: GraphData,
    width: int = 800,
    height: int = 600,
    layout: bool = False,
    strict: bool = False,
) -> str:
    """Render graph data as an SVG string.

    Args:
        data: graph to render.
        width: declared canvas width.
        height: declared canvas height.
        layout: place nodes with layered_layout; otherwise every element
            sits at the origin.
        strict: validate the graph first (see validate_graph).

    Returns:
        the SVG document as a string.
    """
    if strict:
        validate_graph(data)

    positions: dict[str, Point] = layered_layout(data, width, height) if layout else {}
    origin: Point = (0, 0)

    parts = [
        f'<svg width="{escape_xml(width)}" height="{escape_xml(height)}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        STYLE_BLOCK,
    ]

    for edge in data.edges:
        x1, y1 = positions.get(edge.source, origin)
        x2, y2 = positions.get(edge.target, origin)
        parts.append(
            f'<line class="edge" x1="{_fmt(x1)}" y1="{_fmt(y1)}" '
            f'x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
            f'data-source="{escape_xml(edge.source)}" '
            f'data-target="{escape_xml(edge.target)}"/>'
        )

    for node in data.nodes:
        cx, cy = positions.get(node.node_id, origin)
        parts.append(
            f'<circle class="{node_class(node)}" r="{NODE_RADIUS}" '
            f'cx="{_fmt(cx)}" cy="{_fmt(cy)}" data-id="{escape_xml(node.node_id)}"/>'
        )
        parts.append(
            f'<text class="label" x="{_fmt(cx)}" y="{_fmt(cy + LABEL_OFFSET)}" '
            f'text-anchor="middle">{escape_xml(node.label)}</text>'
        )

    parts.append("</svg>")
    return "".join(parts)
