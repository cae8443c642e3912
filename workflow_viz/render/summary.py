"""Human-readable text summary of a workflow graph."""

from workflow_viz.models.graph_data import GraphData


def _metric(value: float | None, fmt: str) -> str:
    return "-" if value is None else format(value, fmt)


def format_graph_summary(data: GraphData) -> str:
    """Format graph data for terminal output."""
    agents = [node for node in data.nodes if node.node_type == "agent"]
    bottlenecks = [node for node in agents if node.is_bottleneck]

    lines = []
    lines.append("=" * 60)
    lines.append("WORKFLOW GRAPH")
    lines.append("=" * 60)
    lines.append("")
    lines.append(f"Nodes: {len(data.nodes)} ({len(agents)} agents)")
    lines.append(f"Edges: {len(data.edges)}")
    lines.append("")

    lines.append("-" * 40)
    lines.append("STEPS")
    lines.append("-" * 40)
    for node in agents:
        marker = " [bottleneck]" if node.is_bottleneck else ""
        lines.append(
            f"  • {node.label} ({node.node_id})"
            f"  latency: {_metric(node.latency, 'g')}"
            f"  cost: {_metric(node.cost, '.4f')}{marker}"
        )
    if not agents:
        lines.append("  (no steps)")
    lines.append("")

    lines.append("-" * 40)
    if bottlenecks:
        lines.append("BOTTLENECKS")
        lines.append("-" * 40)
        for node in bottlenecks:
            lines.append(f"  ! {node.label} ({node.node_id})")
    else:
        lines.append("✓ No bottlenecks flagged")
        lines.append("-" * 40)
    lines.append("")

    return "\n".join(lines)
