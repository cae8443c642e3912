"""Data model for the rendered workflow graph.

A GraphData value is built fresh from a workflow and handed to the
renderers; it is never mutated after construction.
"""

from typing import Any, Literal

from pydantic import BaseModel


START_NODE_ID = "start"
END_NODE_ID = "end"

NodeType = Literal["agent", "start", "end"]


class GraphNode(BaseModel):
    """a node in the graph, either an agent step or a start/end sentinel."""

    model_config = {"frozen": True}

    node_id: str
    label: str
    node_type: NodeType = "agent"
    # copied from the matching StepAnalysis, None when there was no match
    latency: float | None = None
    cost: float | None = None
    is_bottleneck: bool | None = None


class GraphEdge(BaseModel):
    """a directed edge between two nodes."""

    model_config = {"frozen": True}

    source: str
    target: str
    label: str | None = None


class GraphData(BaseModel):
    """the full node/edge list produced for one workflow."""

    model_config = {"frozen": True}

    nodes: list[GraphNode]
    edges: list[GraphEdge]

    def node_ids(self) -> list[str]:
        """Node ids in insertion order."""
        return [node.node_id for node in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict, omitting absent metrics."""
        return self.model_dump(exclude_none=True)
