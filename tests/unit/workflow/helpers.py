"""Graph inspection helpers for workflow tests."""

from typing import Any

from cadence.workflow.graph import BranchHandle, NodeType, WorkflowGraph


def main_line(graph: WorkflowGraph) -> list[NodeType]:
    """Node types along the path from start, following true and plain edges."""
    types = [graph.start.type]
    current = graph.start.id
    while True:
        forward = [
            edge
            for edge in graph.outgoing(current)
            if edge.source_handle in (None, BranchHandle.TRUE)
        ]
        if not forward:
            return types
        current = forward[0].target
        types.append(graph.node(current).type)


def canonical(graph: WorkflowGraph) -> tuple[list[Any], list[Any]]:
    """Graph shape with node ids replaced by their position."""
    index = {node.id: i for i, node in enumerate(graph.nodes)}
    nodes = [(node.type, node.data) for node in graph.nodes]
    edges = sorted(
        (
            index[edge.source],
            index[edge.target],
            edge.source_handle.value if edge.source_handle else "",
            edge.condition or "",
            edge.label or "",
        )
        for edge in graph.edges
    )
    return nodes, edges
