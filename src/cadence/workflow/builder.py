"""Workflow builder that turns an Answer Snapshot into a campaign graph"""

import logging

from cadence.config.answers import AnswerSnapshot
from cadence.config.settings import BuilderDefaults
from cadence.config.validation import validate_answers
from cadence.core.errors import GraphBuildError, GraphValidationError
from cadence.workflow.assemblers import DEFAULT_ASSEMBLERS, ChannelAssembler, GraphDraft
from cadence.workflow.graph import WorkflowGraph
from cadence.workflow.ids import IdGenerator
from cadence.workflow.validation import validate_graph

logger = logging.getLogger(__name__)


class WorkflowBuilder:
    """Builds a campaign workflow graph from questionnaire answers."""

    def __init__(
        self,
        defaults: BuilderDefaults | None = None,
        assemblers: tuple[ChannelAssembler, ...] = DEFAULT_ASSEMBLERS,
    ):
        """
        Initialize WorkflowBuilder.

        Args:
            defaults: Values for optional answers left empty
            assemblers: Channel assemblers, in the order they are applied
        """
        self.defaults = defaults or BuilderDefaults()
        self.assemblers = assemblers

    def build(self, answers: AnswerSnapshot, ids: IdGenerator | None = None) -> WorkflowGraph:
        """
        Build a fresh workflow graph.

        The graph always opens with a start node and closes with an end node.
        Missing optional answers are filled from the builder defaults.

        Args:
            answers: Snapshot taken when the operator reached confirmation
            ids: Id generator for this build (a new one by default)

        Returns:
            WorkflowGraph with nodes in assembly order

        Raises:
            GraphBuildError: If the assembled graph breaks a structural invariant
        """
        for issue in validate_answers(answers):
            logger.debug(f"Answer issue [{issue.code}] on '{issue.field}': {issue.message}")

        draft = GraphDraft(ids or IdGenerator())
        for assembler in self.assemblers:
            if not assembler.applies(answers):
                logger.debug(f"Skipping '{assembler.name}' assembler")
                continue
            assembler.assemble(draft, answers, self.defaults)

        graph = draft.finish()

        try:
            validate_graph(graph.nodes, graph.edges)
        except GraphValidationError as e:
            raise GraphBuildError(f"Built graph is invalid: {e.message}", **e.context) from e

        logger.info(f"Built workflow with {len(graph.nodes)} nodes and {len(graph.edges)} edges")
        return graph


def build_workflow(
    answers: AnswerSnapshot, defaults: BuilderDefaults | None = None
) -> WorkflowGraph:
    """Build a workflow graph with the default assemblers."""
    return WorkflowBuilder(defaults).build(answers)
