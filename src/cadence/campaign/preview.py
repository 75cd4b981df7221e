"""Preview handoff.

The preview panel shows one summary row per action and draws the raw graph.
The builder pushes both to a PreviewSink and keeps no copy.
"""

from typing import Protocol

from pydantic import BaseModel

from cadence.config.answers import AnswerSnapshot
from cadence.config.settings import BuilderDefaults
from cadence.core.constants import Channel
from cadence.workflow.builder import build_workflow
from cadence.workflow.graph import WorkflowGraph


class PreviewStep(BaseModel):
    """Summary row for the preview panel."""

    id: str
    type: str
    title: str
    description: str = ""
    channel: Channel | None = None


class PreviewSink(Protocol):
    """Receives the preview of a freshly built workflow."""

    def publish(self, preview: list[PreviewStep], graph: WorkflowGraph) -> None:
        """Replace whatever the sink showed before with this workflow."""
        ...


def channel_for(step_type: str) -> Channel | None:
    """Derive the channel from a step type prefix (``linkedin_visit`` -> linkedin)."""
    for channel in Channel:
        if step_type.startswith(f"{channel.value}_"):
            return channel
    return None


def preview_steps(graph: WorkflowGraph) -> list[PreviewStep]:
    """Summaries of every action node, in build order."""
    return [
        PreviewStep(
            id=node.id,
            type=node.type.value,
            title=node.title,
            description=str(node.data.get("description") or ""),
            channel=channel_for(node.type.value),
        )
        for node in graph.nodes
        if not node.type.is_terminal
    ]


def publish_workflow(
    answers: AnswerSnapshot, sink: PreviewSink, defaults: BuilderDefaults | None = None
) -> WorkflowGraph:
    """Build a workflow, hand its preview to ``sink`` and return the graph."""
    graph = build_workflow(answers, defaults)
    sink.publish(preview_steps(graph), graph)
    return graph
