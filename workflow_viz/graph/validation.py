"""Strict-mode checks for workflows and graph data.

Nothing here runs unless a caller asks for strict mode; the default
behaviour of the builder and renderers is to pass malformed input through.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from workflow_viz.models.graph_data import GraphData
from workflow_viz.models.workflow import Workflow


class GraphValidationError(ValueError):
    """Base class for strict-mode validation failures."""


class InvalidReferenceError(GraphValidationError):
    """An edge or dependency points at an identifier that is not a node."""

    def __init__(self, identifier: str, referenced_by: str) -> None:
        self.identifier = identifier
        self.referenced_by = referenced_by
        super().__init__(
            f"unknown identifier {identifier!r} referenced by {referenced_by!r}"
        )


class DuplicateIdentifierError(GraphValidationError):
    """Two steps or nodes share an identifier."""

    def __init__(self, identifiers: list[str]) -> None:
        self.identifiers = identifiers
        super().__init__(f"duplicate identifiers: {', '.join(identifiers)}")


class CyclicDependencyError(GraphValidationError):
    """Step dependencies form a cycle."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"dependency cycle: {' -> '.join(cycle)}")


def _duplicates(identifiers: Iterable[str]) -> list[str]:
    counts = Counter(identifiers)
    return [identifier for identifier, count in counts.items() if count > 1]


def find_cycle(dependencies: dict[str, list[str]]) -> list[str] | None:
    """Return one dependency cycle as a closed path, or None if acyclic.

    Args:
        dependencies: step id -> ids it depends on. Ids missing from the
            mapping are treated as having no dependencies.

    Returns:
        e.g. ["a", "b", "a"] when a depends on b and b depends on a.
    """
    # iterative DFS with white/grey/black colouring
    visiting: set[str] = set()
    done: set[str] = set()

    for root in dependencies:
        if root in done:
            continue
        path: list[str] = [root]
        stack = [iter(dependencies.get(root, []))]
        visiting.add(root)

        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                finished = path.pop()
                visiting.discard(finished)
                done.add(finished)
                continue
            if child in visiting:
                return path[path.index(child):] + [child]
            if child in done:
                continue
            visiting.add(child)
            path.append(child)
            stack.append(iter(dependencies.get(child, [])))

    return None


def validate_workflow(workflow: Workflow, reserved: Iterable[str] = ()) -> None:
    """Check a workflow for duplicate ids, unknown dependencies and cycles.

    Args:
        workflow: the workflow to check.
        reserved: ids that steps may not use (the start/end sentinels).

    Raises:
        DuplicateIdentifierError: two steps share an id, or a step uses a reserved id.
        InvalidReferenceError: a dependency names a step that does not exist.
        CyclicDependencyError: the dependencies contain a cycle.
    """
    step_ids = [step.step_id for step in workflow.steps]

    duplicates = _duplicates([*reserved, *step_ids])
    if duplicates:
        raise DuplicateIdentifierError(duplicates)

    known = set(step_ids)
    for step in workflow.steps:
        for dep in step.dependencies:
            if dep not in known:
                raise InvalidReferenceError(dep, step.step_id)

    cycle = find_cycle({step.step_id: step.dependencies for step in workflow.steps})
    if cycle:
        raise CyclicDependencyError(cycle)


def validate_graph(data: GraphData) -> None:
    """Check that node ids are unique and every edge endpoint is a node.

    Raises:
        DuplicateIdentifierError: two nodes share an id.
        InvalidReferenceError: an edge references a missing node.
    """
    node_ids = data.node_ids()

    duplicates = _duplicates(node_ids)
    if duplicates:
        raise DuplicateIdentifierError(duplicates)

    known = set(node_ids)
    for edge in data.edges:
        edge_name = f"{edge.source}->{edge.target}"
        if edge.source not in known:
            raise InvalidReferenceError(edge.source, edge_name)
        if edge.target not in known:
            raise InvalidReferenceError(edge.target, edge_name)
