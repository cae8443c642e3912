"""Core data models for workflow graphs."""

from workflow_viz.models.workflow import (
    StepAnalysis,
    Workflow,
    WorkflowStep,
)
from workflow_viz.models.graph_data import (
    END_NODE_ID,
    START_NODE_ID,
    GraphData,
    GraphEdge,
    GraphNode,
)

__all__ = [
    # Workflow input
    "StepAnalysis",
    "Workflow",
    "WorkflowStep",
    # Graph data
    "END_NODE_ID",
    "START_NODE_ID",
    "GraphData",
    "GraphEdge",
    "GraphNode",
]
