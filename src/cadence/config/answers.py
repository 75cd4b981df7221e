"""Answer Snapshot model.

The questionnaire collects answers incrementally and hands them over as one
mapping when the operator reaches the confirmation step. AnswerSnapshot is the
frozen, validated view of that mapping. It accepts the questionnaire's
camelCase keys (``linkedinActions``) as well as snake_case attribute names.

Optional values are resolved against BuilderDefaults through the ``resolved_*``
helpers; nothing here raises for a missing optional answer.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cadence.config.settings import BuilderDefaults
from cadence.core.constants import Channel, LinkedInAction, VoiceTiming

# Industries shorter than this are treated as unfinished chip input
MIN_INDUSTRY_LENGTH = 2

DEFAULT_WORKING_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")


class DelaySpec(BaseModel):
    """Resolved delay duration."""

    model_config = ConfigDict(frozen=True)

    days: int
    hours: int
    minutes: int

    @property
    def title(self) -> str:
        return f"Wait {self.days}d {self.hours}h {self.minutes}m"


class VoiceAgentSpec(BaseModel):
    """Resolved voice agent selection."""

    model_config = ConfigDict(frozen=True)

    agent_id: str
    agent_name: str
    context: str


class AnswerSnapshot(BaseModel):
    """Point-in-time view of every questionnaire answer."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Target definition
    industries: list[str] = Field(default_factory=list)
    custom_industry: str | None = None
    location: str | list[str] | None = None
    roles: list[str] = Field(default_factory=list)

    # Platform selection
    platforms: list[str] = Field(default_factory=list)

    # Platform logic
    linkedin_actions: list[str] = Field(default_factory=list)
    enable_connection_message: bool | None = None
    linkedin_connection_message: str | None = None
    linkedin_message: str | None = None
    whatsapp_message: str | None = None
    email_subject: str | None = None
    email_message: str | None = None

    # Voice agent
    voice_enabled: bool | None = None
    voice_timing: VoiceTiming | None = None
    voice_agent_id: str | None = None
    voice_agent_name: str | None = None
    voice_context: str | None = None

    # Conditions and delays
    delay_days: int | None = Field(default=None, ge=0)
    delay_hours: int | None = Field(default=None, ge=0)
    delay_minutes: int | None = Field(default=None, ge=0)
    condition_type: str | None = None

    # Campaign settings
    campaign_name: str | None = None
    campaign_duration: int | None = Field(default=None, gt=0)
    # 0 means "not chosen" and resolves to the default volume
    daily_lead_volume: int | None = Field(default=None, ge=0)
    working_days: list[str] = Field(default_factory=lambda: list(DEFAULT_WORKING_DAYS))
    smart_throttling: bool = True

    @field_validator("industries", "roles", "platforms", "linkedin_actions", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("working_days", mode="before")
    @classmethod
    def _none_as_default_days(cls, v: Any) -> Any:
        return list(DEFAULT_WORKING_DAYS) if v is None else v

    @field_validator("smart_throttling", mode="before")
    @classmethod
    def _none_as_throttled(cls, v: Any) -> Any:
        return True if v is None else v

    def selects(self, channel: Channel | str) -> bool:
        """Check whether a channel was picked.

        Platform names are matched case-insensitively and by substring, since
        the questionnaire may store display names such as "LinkedIn".
        """
        name = Channel(channel).value
        return any(name in str(platform).lower() for platform in self.platforms)

    def wants(self, action: LinkedInAction | str) -> bool:
        """Check whether a LinkedIn action was picked."""
        return LinkedInAction(action).value in self.linkedin_actions

    def location_list(self) -> list[str]:
        if self.location is None:
            return []
        if isinstance(self.location, str):
            return [self.location] if self.location.strip() else []
        return [loc for loc in self.location if str(loc).strip()]

    def all_industries(self) -> list[str]:
        """Selected industries plus the free-text custom industry, if any."""
        industries = list(self.industries)
        custom = (self.custom_industry or "").strip()
        if custom and custom not in industries:
            industries.append(custom)
        return industries

    def has_target_criteria(self) -> bool:
        return bool(
            self.industries
            or self.location_list()
            or self.roles
            or (self.custom_industry or "").strip()
        )

    def lead_query(self) -> str:
        """Build the lead search query: roles AND industries, each OR-joined."""
        parts: list[str] = []
        if self.roles:
            parts.append(" OR ".join(self.roles))
        industries = self.all_industries()
        if industries:
            parts.append(" OR ".join(industries))
        return " AND ".join(parts) or "Target leads"

    def lead_filters(self) -> dict[str, Any]:
        """Build lead search filters keyed by the lead provider's parameter names."""
        filters: dict[str, Any] = {}
        if self.roles:
            filters["person_titles"] = list(self.roles)
        industries = [
            industry
            for industry in self.all_industries()
            if len(str(industry).strip()) >= MIN_INDUSTRY_LENGTH
        ]
        if industries:
            filters["organization_industries"] = industries
        locations = self.location_list()
        if locations:
            filters["organization_locations"] = locations
        return filters

    def lead_filters_json(self) -> str:
        return json.dumps(self.lead_filters())

    def resolved_delay(self, defaults: BuilderDefaults) -> DelaySpec:
        return DelaySpec(
            days=self.delay_days if self.delay_days is not None else defaults.delay.days,
            hours=self.delay_hours if self.delay_hours is not None else defaults.delay.hours,
            minutes=(
                self.delay_minutes if self.delay_minutes is not None else defaults.delay.minutes
            ),
        )

    def resolved_condition(self, defaults: BuilderDefaults) -> str:
        return self.condition_type or defaults.condition_type

    def resolved_connection_message(self, defaults: BuilderDefaults) -> str:
        """Connection note text, or an empty string when notes are disabled."""
        enabled = (
            self.enable_connection_message
            if self.enable_connection_message is not None
            else defaults.messages.enable_connection_message
        )
        if not enabled:
            return ""
        return self.linkedin_connection_message or defaults.messages.linkedin_connection_message

    def resolved_linkedin_message(self, defaults: BuilderDefaults) -> str:
        return self.linkedin_message or defaults.messages.linkedin_message

    def resolved_email(self, defaults: BuilderDefaults) -> tuple[str, str]:
        return (
            self.email_subject or defaults.messages.email_subject,
            self.email_message or defaults.messages.email_body,
        )

    def resolved_voice_agent(self, defaults: BuilderDefaults) -> VoiceAgentSpec:
        context = (self.voice_context or "").strip()
        return VoiceAgentSpec(
            agent_id=self.voice_agent_id or defaults.voice.agent_id,
            agent_name=self.voice_agent_name or defaults.voice.agent_name,
            context=context or defaults.voice.context,
        )

    def resolved_leads_per_day(self, defaults: BuilderDefaults) -> int:
        return self.daily_lead_volume or defaults.leads_per_day

    def voice_active(self) -> bool:
        """Voice is on when picked, unless explicitly disabled."""
        return self.selects(Channel.VOICE) and self.voice_enabled is not False
