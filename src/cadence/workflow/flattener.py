"""Topological flattener: workflow graph to ordered backend steps."""

import logging
from typing import Any

from pydantic import BaseModel, Field

from cadence.core.errors import FlattenError
from cadence.workflow.graph import BranchHandle, Edge, Node

logger = logging.getLogger(__name__)

# Keys of node data that become step fields instead of step config
_STEP_FIELDS = ("title", "description")

# True branches continue the main line first, false branches are walked last
_HANDLE_RANK: dict[BranchHandle | None, int] = {
    BranchHandle.TRUE: 0,
    None: 1,
    BranchHandle.FALSE: 2,
}


class Step(BaseModel):
    """One backend-executable step."""

    type: str = Field(description="Node type the step was derived from")
    order: int = Field(ge=0, description="Zero-based execution order")
    title: str
    description: str = ""
    config: dict[str, Any] = Field(default_factory=dict)


def find_source(nodes: list[Node], edges: list[Edge]) -> Node:
    """
    Find the node the walk starts from.

    The source is the one node that appears as an edge source but never as a
    target. A graph consisting of a single node with no edges is its own
    source.

    Raises:
        FlattenError: If there is no unique source
    """
    if not edges and len(nodes) == 1:
        return nodes[0]

    sources = {edge.source for edge in edges}
    targets = {edge.target for edge in edges}
    candidates = [node for node in nodes if node.id in sources and node.id not in targets]
    if len(candidates) != 1:
        raise FlattenError(
            f"Expected exactly one source node, found {len(candidates)}",
            candidates=[node.id for node in candidates],
        )
    return candidates[0]


def flatten_to_steps(nodes: list[Node], edges: list[Edge]) -> list[Step]:
    """
    Flatten a workflow graph into an order-indexed step list.

    Walks depth-first from the source node. Each node gets its order on first
    visit; start and end nodes are walked through but emit no step and take
    no order number. For condition nodes the true branch is followed first.

    Args:
        nodes: Graph nodes, including start and end
        edges: Graph edges

    Returns:
        Steps sorted by order

    Raises:
        FlattenError: If an edge references an unknown node or no unique
            source node exists
    """
    if not nodes:
        return []

    by_id = {node.id: node for node in nodes}
    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if endpoint not in by_id:
                raise FlattenError(
                    f"Edge references unknown node '{endpoint}'", edge=edge.id
                )

    outgoing: dict[str, list[Edge]] = {node.id: [] for node in nodes}
    for edge in edges:
        outgoing[edge.source].append(edge)
    for node_edges in outgoing.values():
        node_edges.sort(key=lambda e: _HANDLE_RANK[e.source_handle])

    source = find_source(nodes, edges)
    visited: set[str] = set()
    steps: list[Step] = []

    def traverse(node_id: str) -> None:
        if node_id in visited:
            return
        visited.add(node_id)
        node = by_id[node_id]
        if not node.type.is_terminal:
            steps.append(_to_step(node, order=len(steps)))
        for edge in outgoing[node_id]:
            traverse(edge.target)

    traverse(source.id)

    skipped = [n.id for n in nodes if n.id not in visited and not n.type.is_terminal]
    if skipped:
        logger.warning(f"Nodes not reachable from '{source.id}' were left out: {skipped}")

    return sorted(steps, key=lambda step: step.order)


def _to_step(node: Node, order: int) -> Step:
    data = node.data or {}
    return Step(
        type=node.type.value,
        order=order,
        title=str(data.get("title") or node.type.value),
        description=str(data.get("description") or ""),
        config={key: value for key, value in data.items() if key not in _STEP_FIELDS},
    )
