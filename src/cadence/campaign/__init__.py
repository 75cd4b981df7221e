"""Handoff of built workflows to the preview panel and the backend."""

from cadence.campaign.draft import (
    CampaignConfig,
    CampaignDraft,
    create_campaign_draft,
    draft_from_answers,
)
from cadence.campaign.preview import (
    PreviewSink,
    PreviewStep,
    channel_for,
    preview_steps,
    publish_workflow,
)

__all__ = [
    "CampaignConfig",
    "CampaignDraft",
    "PreviewSink",
    "PreviewStep",
    "channel_for",
    "create_campaign_draft",
    "draft_from_answers",
    "preview_steps",
    "publish_workflow",
]
