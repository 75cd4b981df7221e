"""Structural validation of workflow graphs.

Checks, in order:
- Unique node and edge ids
- Every edge endpoint exists
- Exactly one start node and one end node
- No cycles
- Every node is reachable from start and reaches end
- Condition nodes have exactly one true and one false branch, the false one
  targeting end
- Every node other than start and end has exactly one incoming edge
"""

from collections import deque

from cadence.core.errors import GraphValidationError
from cadence.workflow.graph import BranchHandle, Edge, Node, NodeType


def validate_graph(nodes: list[Node], edges: list[Edge]) -> None:
    """
    Validate a workflow graph.

    Args:
        nodes: Graph nodes, including start and end
        edges: Graph edges

    Raises:
        GraphValidationError: On the first broken invariant
    """
    node_ids = [node.id for node in nodes]
    duplicates = sorted({node_id for node_id in node_ids if node_ids.count(node_id) > 1})
    if duplicates:
        raise GraphValidationError(f"Duplicate node IDs: {duplicates}")

    edge_ids = [edge.id for edge in edges]
    duplicates = sorted({edge_id for edge_id in edge_ids if edge_ids.count(edge_id) > 1})
    if duplicates:
        raise GraphValidationError(f"Duplicate edge IDs: {duplicates}")

    node_id_set = set(node_ids)
    for edge in edges:
        if edge.source not in node_id_set:
            raise GraphValidationError(
                f"Edge source '{edge.source}' not found in nodes", edge=edge.id
            )
        if edge.target not in node_id_set:
            raise GraphValidationError(
                f"Edge target '{edge.target}' not found in nodes", edge=edge.id
            )

    starts = [node for node in nodes if node.type == NodeType.START]
    ends = [node for node in nodes if node.type == NodeType.END]
    if len(starts) != 1:
        raise GraphValidationError(f"Expected exactly one start node, found {len(starts)}")
    if len(ends) != 1:
        raise GraphValidationError(f"Expected exactly one end node, found {len(ends)}")
    start_id, end_id = starts[0].id, ends[0].id

    adjacency: dict[str, list[str]] = {node_id: [] for node_id in node_ids}
    reverse: dict[str, list[str]] = {node_id: [] for node_id in node_ids}
    for edge in edges:
        adjacency[edge.source].append(edge.target)
        reverse[edge.target].append(edge.source)

    cycle = find_cycle(adjacency)
    if cycle:
        raise GraphValidationError(f"Cycle detected: {' -> '.join(cycle)}")

    unreachable = sorted(node_id_set - _reachable(start_id, adjacency))
    if unreachable:
        raise GraphValidationError(f"Nodes unreachable from start: {unreachable}")

    dead_ends = sorted(node_id_set - _reachable(end_id, reverse))
    if dead_ends:
        raise GraphValidationError(f"Nodes with no path to end: {dead_ends}")

    for node in nodes:
        outgoing = [edge for edge in edges if edge.source == node.id]
        incoming = [edge for edge in edges if edge.target == node.id]

        if node.type == NodeType.CONDITION:
            _validate_condition(node, outgoing, end_id)

        if node.type.is_terminal:
            continue
        if len(incoming) != 1:
            raise GraphValidationError(
                f"Node '{node.id}' has {len(incoming)} incoming edges, expected 1",
                node_type=node.type.value,
            )


def _validate_condition(node: Node, outgoing: list[Edge], end_id: str) -> None:
    handles = sorted(edge.source_handle.value for edge in outgoing if edge.source_handle)
    if len(outgoing) != 2 or handles != [BranchHandle.FALSE.value, BranchHandle.TRUE.value]:
        raise GraphValidationError(
            f"Condition node '{node.id}' must have exactly one 'true' and one 'false' edge",
            handles=handles,
        )
    false_edge = next(edge for edge in outgoing if edge.source_handle == BranchHandle.FALSE)
    if false_edge.target != end_id:
        raise GraphValidationError(
            f"False branch of condition '{node.id}' must target the end node",
            target=false_edge.target,
        )


def find_cycle(adjacency: dict[str, list[str]]) -> list[str]:
    """
    Find a cycle using DFS.

    Args:
        adjacency: Node id to successor ids

    Returns:
        Node ids forming the first cycle found (first id repeated at the end),
        or an empty list if the graph is acyclic
    """
    visited: set[str] = set()
    rec_stack: set[str] = set()
    path: list[str] = []

    def dfs(node_id: str) -> list[str]:
        visited.add(node_id)
        rec_stack.add(node_id)
        path.append(node_id)

        for neighbor in adjacency.get(node_id, []):
            if neighbor not in visited:
                found = dfs(neighbor)
                if found:
                    return found
            elif neighbor in rec_stack:
                return path[path.index(neighbor) :] + [neighbor]

        rec_stack.remove(node_id)
        path.pop()
        return []

    for node_id in adjacency:
        if node_id not in visited:
            cycle = dfs(node_id)
            if cycle:
                return cycle
    return []


def _reachable(origin: str, adjacency: dict[str, list[str]]) -> set[str]:
    reached: set[str] = set()
    queue: deque[str] = deque([origin])
    while queue:
        current = queue.popleft()
        if current in reached:
            continue
        reached.add(current)
        queue.extend(adjacency.get(current, []))
    return reached
