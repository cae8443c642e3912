"""Build graph data from a workflow description.

Usage:

    from workflow_viz.graph.builder import build_graph
    data = build_graph({"id": "wf-1", "steps": [...], "stepAnalysis": [...]})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from workflow_viz.graph.validation import validate_workflow
from workflow_viz.models.graph_data import (
    END_NODE_ID,
    START_NODE_ID,
    GraphData,
    GraphEdge,
    GraphNode,
)
from workflow_viz.models.workflow import StepAnalysis, Workflow

logger = logging.getLogger(__name__)


def _coerce_workflow(workflow: Workflow | Mapping[str, Any]) -> Workflow:
    if isinstance(workflow, Workflow):
        return workflow
    return Workflow.model_validate(workflow)


def build_graph(
    workflow: Workflow | Mapping[str, Any],
    strict: bool = False,
) -> GraphData:
    """Build the node/edge list for a workflow.

    Nodes are the start sentinel, one agent node per step in input order,
    then the end sentinel. Edges are added in three passes:

    1. start -> every step without dependencies
    2. dep -> step for every dependency
    3. step -> end for every step that no step lists as a dependency

    Args:
        workflow: a Workflow, or a mapping validated into one.
        strict: reject duplicate step ids, unknown dependencies and
            dependency cycles instead of passing them through.

    Returns:
        GraphData for the workflow.

    Raises:
        pydantic.ValidationError: the mapping does not describe a workflow.
        GraphValidationError: strict mode only, see validate_workflow.
    """
    workflow = _coerce_workflow(workflow)

    if strict:
        validate_workflow(workflow, reserved=(START_NODE_ID, END_NODE_ID))

    # later entries win when a step id appears twice
    analysis_by_step: dict[str, StepAnalysis] = {
        entry.step_id: entry for entry in (workflow.step_analysis or [])
    }

    nodes: list[GraphNode] = [
        GraphNode(node_id=START_NODE_ID, label="Start", node_type="start"),
    ]
    for step in workflow.steps:
        analysis = analysis_by_step.get(step.step_id)
        if analysis is None:
            nodes.append(GraphNode(
                node_id=step.step_id,
                label=step.agent_name,
                node_type="agent",
            ))
            continue

        nodes.append(GraphNode(
            node_id=step.step_id,
            label=step.agent_name,
            node_type="agent",
            latency=analysis.latency,
            cost=analysis.cost,
            is_bottleneck=analysis.is_bottleneck,
        ))
    nodes.append(GraphNode(node_id=END_NODE_ID, label="End", node_type="end"))

    edges: list[GraphEdge] = []

    # connect start to root steps
    for step in workflow.steps:
        if not step.dependencies:
            edges.append(GraphEdge(source=START_NODE_ID, target=step.step_id))

    # connect dependencies
    step_ids = {step.step_id for step in workflow.steps}
    for step in workflow.steps:
        for dep in step.dependencies:
            if dep not in step_ids:
                logger.warning(
                    "step %r depends on unknown step %r; edge will dangle",
                    step.step_id,
                    dep,
                )
            edges.append(GraphEdge(source=dep, target=step.step_id))

    # connect steps nobody depends on to end
    referenced = {dep for step in workflow.steps for dep in step.dependencies}
    for step in workflow.steps:
        if step.step_id not in referenced:
            edges.append(GraphEdge(source=step.step_id, target=END_NODE_ID))

    logger.debug(
        "built graph for workflow %r: %d nodes, %d edges",
        workflow.workflow_id,
        len(nodes),
        len(edges),
    )
    return GraphData(nodes=nodes, edges=edges)
