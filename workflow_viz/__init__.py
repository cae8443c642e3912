"""workflow_viz - turn agent workflows into graphs and render them as SVG or DOT."""

from workflow_viz.models.workflow import (
    StepAnalysis,
    Workflow,
    WorkflowStep,
)
from workflow_viz.models.graph_data import (
    GraphData,
    GraphEdge,
    GraphNode,
)
from workflow_viz.graph.builder import build_graph
from workflow_viz.graph.validation import (
    CyclicDependencyError,
    DuplicateIdentifierError,
    GraphValidationError,
    InvalidReferenceError,
)
from workflow_viz.render.dot import render_dot
from workflow_viz.render.svg import render_svg

__all__ = [
    # Workflow input
    "StepAnalysis",
    "Workflow",
    "WorkflowStep",
    # Graph data
    "GraphData",
    "GraphEdge",
    "GraphNode",
    # Builder and renderers
    "build_graph",
    "render_dot",
    "render_svg",
    # Strict mode errors
    "CyclicDependencyError",
    "DuplicateIdentifierError",
    "GraphValidationError",
    "InvalidReferenceError",
]
