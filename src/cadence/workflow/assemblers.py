"""Channel subgraph assemblers.

Each assembler appends its channel's nodes to a GraphDraft. The draft tracks
the path head, the node the next action attaches to, and owns the reserved
``end`` id so condition nodes can route their false branch there before the
end node itself is emitted.
"""

import logging
from typing import Any, Protocol

from cadence.config.answers import AnswerSnapshot, DelaySpec
from cadence.config.settings import BuilderDefaults
from cadence.core.constants import (
    FALSE_BRANCH_LABEL,
    TRUE_BRANCH_LABEL,
    Channel,
    LinkedInAction,
    VoiceTiming,
    condition_label,
)
from cadence.workflow.graph import BranchHandle, Edge, Node, NodeType, WorkflowGraph
from cadence.workflow.ids import IdGenerator

logger = logging.getLogger(__name__)

# Node id prefixes
_PREFIXES: dict[NodeType, str] = {
    NodeType.START: "start",
    NodeType.END: "end",
    NodeType.LEAD_GENERATION: "lead_gen",
    NodeType.LINKEDIN_VISIT: "linkedin_visit",
    NodeType.LINKEDIN_FOLLOW: "linkedin_follow",
    NodeType.LINKEDIN_CONNECT: "linkedin_connect",
    NodeType.LINKEDIN_MESSAGE: "linkedin_message",
    NodeType.EMAIL_SEND: "email",
    NodeType.VOICE_AGENT_CALL: "voice",
    NodeType.DELAY: "delay",
    NodeType.CONDITION: "condition",
}


class GraphDraft:
    """Graph under construction with a single path head."""

    def __init__(self, ids: IdGenerator | None = None):
        self.ids = ids or IdGenerator()
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.end_id = self.ids.next(_PREFIXES[NodeType.END])
        self.head = self.add_node(NodeType.START, {"title": "Start"}).id

    def add_node(self, node_type: NodeType, data: dict[str, Any]) -> Node:
        node = Node(id=self.ids.next(_PREFIXES[node_type]), type=node_type, data=data)
        self.nodes.append(node)
        return node

    def connect(
        self,
        source: str,
        target: str,
        handle: BranchHandle | None = None,
        condition: str | None = None,
        label: str | None = None,
    ) -> Edge:
        edge = Edge(
            id=self.ids.edge(source, target, handle.value if handle else None),
            source=source,
            target=target,
            source_handle=handle,
            condition=condition,
            label=label,
        )
        self.edges.append(edge)
        return edge

    def append(self, node_type: NodeType, data: dict[str, Any]) -> Node:
        """Attach a node to the path head and make it the new head."""
        node = self.add_node(node_type, data)
        self.connect(self.head, node.id)
        self.head = node.id
        return node

    def append_delay(self, delay: DelaySpec) -> Node:
        return self.append(
            NodeType.DELAY,
            {
                "title": delay.title,
                "delayDays": delay.days,
                "delayHours": delay.hours,
                "delayMinutes": delay.minutes,
            },
        )

    def append_gated(
        self, condition_type: str, node_type: NodeType, data: dict[str, Any]
    ) -> Node:
        """Append a condition node guarding ``node_type``.

        The true branch leads to the new node, which becomes the head; the
        false branch short-circuits to the end node.
        """
        gate = self.append(
            NodeType.CONDITION,
            {
                "title": f"Check: {condition_label(condition_type)}",
                "conditionType": condition_type,
            },
        )
        node = self.add_node(node_type, data)
        self.connect(
            gate.id,
            node.id,
            handle=BranchHandle.TRUE,
            condition=condition_type,
            label=TRUE_BRANCH_LABEL,
        )
        self.connect(gate.id, self.end_id, handle=BranchHandle.FALSE, label=FALSE_BRANCH_LABEL)
        self.head = node.id
        return node

    def contains(self, node_type: NodeType) -> bool:
        return any(node.type == node_type for node in self.nodes)

    def finish(self) -> WorkflowGraph:
        """Emit the end node and close the path."""
        self.nodes.append(Node(id=self.end_id, type=NodeType.END, data={"title": "End"}))
        self.connect(self.head, self.end_id)
        return WorkflowGraph(nodes=self.nodes, edges=self.edges)


class ChannelAssembler(Protocol):
    """Appends one channel's nodes to a draft."""

    name: str

    def applies(self, answers: AnswerSnapshot) -> bool:
        """Whether this assembler contributes anything for the given answers."""
        ...

    def assemble(
        self, draft: GraphDraft, answers: AnswerSnapshot, defaults: BuilderDefaults
    ) -> None:
        """Append nodes and edges to the draft."""
        ...


class LeadGenerationAssembler:
    """Lead generation node, emitted when any target criteria is present."""

    name = "lead_generation"

    def applies(self, answers: AnswerSnapshot) -> bool:
        return answers.has_target_criteria()

    def assemble(
        self, draft: GraphDraft, answers: AnswerSnapshot, defaults: BuilderDefaults
    ) -> None:
        draft.append(
            NodeType.LEAD_GENERATION,
            {
                "title": "Generate Leads",
                "leadGenerationQuery": answers.lead_query(),
                "leadGenerationFilters": answers.lead_filters_json(),
                "leadGenerationLimit": answers.resolved_leads_per_day(defaults),
            },
        )


class LinkedInAssembler:
    """Visit, follow and connect, then a gated message after acceptance."""

    name = Channel.LINKEDIN.value

    def applies(self, answers: AnswerSnapshot) -> bool:
        return answers.selects(Channel.LINKEDIN) and bool(answers.linkedin_actions)

    def assemble(
        self, draft: GraphDraft, answers: AnswerSnapshot, defaults: BuilderDefaults
    ) -> None:
        if answers.wants(LinkedInAction.VISIT_PROFILE):
            draft.append(NodeType.LINKEDIN_VISIT, {"title": "Visit LinkedIn Profile"})

        if answers.wants(LinkedInAction.FOLLOW_PROFILE):
            draft.append(NodeType.LINKEDIN_FOLLOW, {"title": "Follow LinkedIn Profile"})

        if not answers.wants(LinkedInAction.SEND_CONNECTION):
            if answers.wants(LinkedInAction.SEND_MESSAGE):
                logger.warning(
                    "LinkedIn message selected without a connection request; "
                    "no message step is added"
                )
            return

        connect_data: dict[str, Any] = {"title": "Send Connection Request"}
        note = answers.resolved_connection_message(defaults)
        if note:
            connect_data["message"] = note
        draft.append(NodeType.LINKEDIN_CONNECT, connect_data)

        if answers.wants(LinkedInAction.SEND_MESSAGE):
            draft.append_delay(answers.resolved_delay(defaults))
            draft.append_gated(
                answers.resolved_condition(defaults),
                NodeType.LINKEDIN_MESSAGE,
                {
                    "title": "Send LinkedIn Message",
                    "message": answers.resolved_linkedin_message(defaults),
                },
            )


class EmailAssembler:
    """Single email send, delayed when a LinkedIn connection precedes it."""

    name = Channel.EMAIL.value

    def applies(self, answers: AnswerSnapshot) -> bool:
        return answers.selects(Channel.EMAIL)

    def assemble(
        self, draft: GraphDraft, answers: AnswerSnapshot, defaults: BuilderDefaults
    ) -> None:
        if draft.contains(NodeType.LINKEDIN_CONNECT):
            draft.append_delay(answers.resolved_delay(defaults))

        subject, body = answers.resolved_email(defaults)
        draft.append(NodeType.EMAIL_SEND, {"title": "Send Email", "subject": subject, "body": body})


class VoiceAssembler:
    """Voice agent call, optionally gated on the LinkedIn condition."""

    name = Channel.VOICE.value

    def applies(self, answers: AnswerSnapshot) -> bool:
        return answers.voice_active()

    def assemble(
        self, draft: GraphDraft, answers: AnswerSnapshot, defaults: BuilderDefaults
    ) -> None:
        agent = answers.resolved_voice_agent(defaults)
        if not (answers.voice_context or "").strip():
            logger.warning("Voice agent context is missing, using default")

        data = {
            "title": f"AI Voice Call - {agent.agent_name}",
            "voiceAgentId": agent.agent_id,
            "voiceAgentName": agent.agent_name,
            "voiceContext": agent.context,
        }

        gated = answers.voice_timing == VoiceTiming.AFTER_LINKEDIN and draft.contains(
            NodeType.LINKEDIN_CONNECT
        )
        if gated:
            draft.append_gated(
                answers.resolved_condition(defaults), NodeType.VOICE_AGENT_CALL, data
            )
        else:
            draft.append(NodeType.VOICE_AGENT_CALL, data)


# Fixed channel precedence
DEFAULT_ASSEMBLERS: tuple[ChannelAssembler, ...] = (
    LeadGenerationAssembler(),
    LinkedInAssembler(),
    EmailAssembler(),
    VoiceAssembler(),
)
