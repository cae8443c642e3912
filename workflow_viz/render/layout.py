"""Layered left-to-right layout for the SVG renderer.

Optional: the SVG renderer emits placeholder coordinates unless a caller
asks for a layout.
"""

from __future__ import annotations

from workflow_viz.models.graph_data import END_NODE_ID, GraphData

Point = tuple[float, float]


def assign_layers(data: GraphData) -> dict[str, int]:
    """Longest-path layer index for every node.

    Relaxation runs at most once per node, so cyclic input terminates
    with finite (if arbitrary) layers. Edges with a missing endpoint are
    ignored.
    """
    node_ids = data.node_ids()
    known = set(node_ids)
    edges = [
        (edge.source, edge.target)
        for edge in data.edges
        if edge.source in known and edge.target in known and edge.source != edge.target
    ]

    layers = {node_id: 0 for node_id in node_ids}
    for _ in range(len(node_ids)):
        changed = False
        for source, target in edges:
            if layers[target] < layers[source] + 1:
                layers[target] = layers[source] + 1
                changed = True
        if not changed:
            break

    # end always sits alone on the far right
    if END_NODE_ID in layers:
        others = [layer for node_id, layer in layers.items() if node_id != END_NODE_ID]
        layers[END_NODE_ID] = max(others, default=-1) + 1

    return layers


def layered_layout(
    data: GraphData,
    width: int = 800,
    height: int = 600,
) -> dict[str, Point]:
    """Map node ids to (x, y) centres inside a width x height canvas.

    Layers are spread evenly left to right; nodes within a layer are
    spread evenly top to bottom in insertion order.
    """
    layers = assign_layers(data)
    if not layers:
        return {}

    columns: dict[int, list[str]] = {}
    for node_id in data.node_ids():
        columns.setdefault(layers[node_id], []).append(node_id)

    layer_count = max(layers.values()) + 1
    x_step = width / (layer_count + 1)

    positions: dict[str, Point] = {}
    for layer, members in columns.items():
        y_step = height / (len(members) + 1)
        for index, node_id in enumerate(members, 1):
            positions[node_id] = (round(x_step * (layer + 1), 2), round(y_step * index, 2))
    return positions
