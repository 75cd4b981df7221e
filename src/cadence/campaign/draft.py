"""Campaign draft document handed to the persistence collaborator."""

import logging
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from cadence.config.answers import AnswerSnapshot
from cadence.config.settings import BuilderDefaults
from cadence.core.errors import CampaignValidationError
from cadence.workflow.builder import build_workflow
from cadence.workflow.flattener import Step, flatten_to_steps
from cadence.workflow.graph import NodeType

logger = logging.getLogger(__name__)

MISSING_LEAD_GENERATION_MESSAGE = (
    "Campaign must include a lead generation step. Go back to Target Definition "
    "and fill in at least one target criteria (Industries, Location, or Roles)."
)


class CampaignConfig(BaseModel):
    """Lead generation cadence of a campaign."""

    leads_per_day: int = Field(gt=0)
    lead_gen_offset: int = Field(default=0, ge=0)
    last_lead_gen_date: date | None = None


class CampaignDraft(BaseModel):
    """Campaign document in draft state."""

    name: str
    status: Literal["draft"] = "draft"
    steps: list[Step]
    config: CampaignConfig
    # Top-level copy of config.leads_per_day kept for older backends
    leads_per_day: int


def create_campaign_draft(
    name: str | None, steps: list[Step], leads_per_day: int
) -> CampaignDraft:
    """
    Assemble a draft campaign from flattened steps.

    Args:
        name: Campaign name
        steps: Output of flatten_to_steps
        leads_per_day: Daily lead generation limit

    Returns:
        CampaignDraft ready to be persisted

    Raises:
        CampaignValidationError: If the name is blank or no lead generation
            step is present
    """
    clean_name = (name or "").strip()
    if not clean_name:
        raise CampaignValidationError("Campaign name is required", field="name")

    if not any(step.type == NodeType.LEAD_GENERATION.value for step in steps):
        raise CampaignValidationError(MISSING_LEAD_GENERATION_MESSAGE, field="steps")

    return CampaignDraft(
        name=clean_name,
        steps=steps,
        config=CampaignConfig(leads_per_day=leads_per_day),
        leads_per_day=leads_per_day,
    )


def draft_from_answers(
    answers: AnswerSnapshot,
    name: str | None = None,
    defaults: BuilderDefaults | None = None,
) -> CampaignDraft:
    """Build, flatten and wrap a workflow into a campaign draft.

    The campaign name falls back to the ``campaignName`` answer.
    """
    defaults = defaults or BuilderDefaults()
    graph = build_workflow(answers, defaults)
    steps = flatten_to_steps(graph.nodes, graph.edges)
    draft = create_campaign_draft(
        name or answers.campaign_name,
        steps,
        answers.resolved_leads_per_day(defaults),
    )
    logger.info(f"Prepared campaign draft '{draft.name}' with {len(steps)} steps")
    return draft
