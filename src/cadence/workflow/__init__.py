"""Campaign workflow graph construction and flattening."""

from cadence.workflow.builder import WorkflowBuilder, build_workflow
from cadence.workflow.flattener import Step, flatten_to_steps
from cadence.workflow.graph import BranchHandle, Edge, Node, NodeType, WorkflowGraph
from cadence.workflow.validation import validate_graph

__all__ = [
    "BranchHandle",
    "Edge",
    "Node",
    "NodeType",
    "Step",
    "WorkflowBuilder",
    "WorkflowGraph",
    "build_workflow",
    "flatten_to_steps",
    "validate_graph",
]
