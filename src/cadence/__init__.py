"""Cadence - outreach campaign workflow builder.

Turns the answers of the campaign questionnaire into a graph of timed,
conditionally-branching actions and flattens it into the ordered step list a
backend scheduler runs.

Quick start:
    from cadence import AnswerSnapshot, build_workflow, flatten_to_steps

    answers = AnswerSnapshot.model_validate(
        {"industries": ["SaaS"], "platforms": ["linkedin"],
         "linkedinActions": ["send_connection", "send_message"]}
    )
    graph = build_workflow(answers)
    steps = flatten_to_steps(graph.nodes, graph.edges)
"""

from cadence.__version__ import __version__
from cadence.campaign import CampaignDraft, create_campaign_draft, draft_from_answers
from cadence.config import AnswerSnapshot, BuilderDefaults, validate_answers
from cadence.core.errors import (
    CadenceError,
    CampaignValidationError,
    ConfigurationError,
    FlattenError,
    GraphBuildError,
    GraphValidationError,
)
from cadence.workflow import Step, WorkflowGraph, build_workflow, flatten_to_steps

__all__ = [
    "__version__",
    "AnswerSnapshot",
    "BuilderDefaults",
    "CampaignDraft",
    "Step",
    "WorkflowGraph",
    "build_workflow",
    "create_campaign_draft",
    "draft_from_answers",
    "flatten_to_steps",
    "validate_answers",
    # Errors
    "CadenceError",
    "CampaignValidationError",
    "ConfigurationError",
    "FlattenError",
    "GraphBuildError",
    "GraphValidationError",
]
