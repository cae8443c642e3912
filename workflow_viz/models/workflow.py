"""Input models for workflows handed over by the analysis component.

The upstream component emits camelCase JSON (agentId, stepAnalysis, ...),
so every model accepts both the camelCase keys and the snake_case field names.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


_INPUT_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class WorkflowStep(BaseModel):
    """One unit of agent work within a workflow."""

    model_config = _INPUT_CONFIG

    step_id: str = Field(alias="id")
    agent_id: str
    agent_name: str
    dependencies: list[str] = Field(default_factory=list)  # ids of other steps
    # part of the input contract, not used by the graph transformation
    input_tokens: int | None = None
    output_tokens: int | None = None


class StepAnalysis(BaseModel):
    """Performance metrics computed for a step by the analysis component."""

    model_config = _INPUT_CONFIG

    step_id: str
    latency: float
    cost: float
    is_bottleneck: bool


class Workflow(BaseModel):
    """A set of agent steps with dependency relationships."""

    model_config = _INPUT_CONFIG

    workflow_id: str | None = Field(default=None, alias="id")
    steps: list[WorkflowStep]
    step_analysis: list[StepAnalysis] | None = None
