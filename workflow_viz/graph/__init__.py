"""Graph construction and validation."""

from workflow_viz.graph.builder import build_graph
from workflow_viz.graph.validation import (
    CyclicDependencyError,
    DuplicateIdentifierError,
    GraphValidationError,
    InvalidReferenceError,
    find_cycle,
    validate_graph,
    validate_workflow,
)

__all__ = [
    "build_graph",
    # strict mode
    "CyclicDependencyError",
    "DuplicateIdentifierError",
    "GraphValidationError",
    "InvalidReferenceError",
    "find_cycle",
    "validate_graph",
    "validate_workflow",
]
