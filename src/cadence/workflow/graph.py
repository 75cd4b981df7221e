"""Workflow graph structures produced by the builder."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """Types of nodes in a campaign workflow graph."""

    START = "start"
    END = "end"
    LEAD_GENERATION = "lead_generation"
    LINKEDIN_VISIT = "linkedin_visit"
    LINKEDIN_FOLLOW = "linkedin_follow"
    LINKEDIN_CONNECT = "linkedin_connect"
    LINKEDIN_MESSAGE = "linkedin_message"
    EMAIL_SEND = "email_send"
    VOICE_AGENT_CALL = "voice_agent_call"
    DELAY = "delay"
    CONDITION = "condition"

    @property
    def is_terminal(self) -> bool:
        return self in (NodeType.START, NodeType.END)


class BranchHandle(str, Enum):
    """Outgoing handles of a condition node."""

    TRUE = "true"
    FALSE = "false"


@dataclass
class Node:
    """Vertex in the workflow graph."""

    id: str
    type: NodeType
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return str(self.data.get("title") or self.type.value)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type.value, "data": dict(self.data)}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Node":
        return cls(id=raw["id"], type=NodeType(raw["type"]), data=dict(raw.get("data") or {}))


@dataclass
class Edge:
    """Directed arc between two nodes."""

    id: str
    source: str
    target: str
    source_handle: BranchHandle | None = None  # Set only on condition branches
    condition: str | None = None  # Condition kind, true branches only
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "sourceHandle": self.source_handle.value if self.source_handle else None,
            "condition": self.condition,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Edge":
        handle = raw.get("sourceHandle")
        return cls(
            id=raw["id"],
            source=raw["source"],
            target=raw["target"],
            source_handle=BranchHandle(handle) if handle else None,
            condition=raw.get("condition"),
            label=raw.get("label"),
        )


@dataclass
class WorkflowGraph:
    """Nodes and edges of one built campaign workflow."""

    nodes: list[Node]
    edges: list[Edge]

    def node(self, node_id: str) -> Node:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(f"Node '{node_id}' not found in graph")

    def nodes_of_type(self, node_type: NodeType) -> list[Node]:
        return [node for node in self.nodes if node.type == node_type]

    def outgoing(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.source == node_id]

    def incoming(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.target == node_id]

    @property
    def start(self) -> Node:
        return self.nodes_of_type(NodeType.START)[0]

    @property
    def end(self) -> Node:
        return self.nodes_of_type(NodeType.END)[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "WorkflowGraph":
        return cls(
            nodes=[Node.from_dict(n) for n in raw.get("nodes", [])],
            edges=[Edge.from_dict(e) for e in raw.get("edges", [])],
        )
