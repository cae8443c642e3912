"""Render graph data in the Graphviz DOT language."""

from __future__ import annotations

from workflow_viz.graph.validation import validate_graph
from workflow_viz.models.graph_data import GraphData, GraphNode


def escape_dot(value: object) -> str:
    """Escape a string for use inside a double-quoted DOT id."""
    text = str(value)
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def node_attributes(node: GraphNode) -> str:
    """Attribute list for a node: label, then start/end/bottleneck styling."""
    attrs = f'label="{escape_dot(node.label)}"'

    if node.node_type == "start":
        attrs += ", shape=circle, style=filled, fillcolor=green"
    elif node.node_type == "end":
        attrs += ", shape=circle, style=filled, fillcolor=red"
    elif node.is_bottleneck:
        attrs += ", style=filled, fillcolor=orange"

    return attrs


def render_dot(data: GraphData, strict: bool = False) -> str:
    """Render graph data as a left-to-right digraph.

    Edge labels are not emitted.
    """
    if strict:
        validate_graph(data)

    lines = [
        "digraph workflow {",
        "  rankdir=LR;",
        "  node [shape=box, style=rounded];",
    ]

    for node in data.nodes:
        lines.append(f'  "{escape_dot(node.node_id)}" [{node_attributes(node)}];')

    for edge in data.edges:
        lines.append(f'  "{escape_dot(edge.source)}" -> "{escape_dot(edge.target)}";')

    lines.append("}")
    return "\n".join(lines) + "\n"
