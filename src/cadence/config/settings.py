"""Builder defaults.

Values substituted for optional answers the questionnaire left empty. They
mirror the initial state of the questionnaire editors, so a graph built from
a partial snapshot matches what the operator saw on screen.
"""

from pydantic import BaseModel, ConfigDict, Field


class DelayDefaults(BaseModel):
    """Default wait between dependent actions."""

    days: int = Field(default=1, ge=0, description="Delay days")
    hours: int = Field(default=0, ge=0, description="Delay hours")
    minutes: int = Field(default=0, ge=0, description="Delay minutes")


class VoiceAgentDefaults(BaseModel):
    """Default voice agent used when none was picked."""

    agent_id: str = Field(default="24", description="Voice agent identifier")
    agent_name: str = Field(default="VAPI Agent", description="Voice agent display name")
    context: str = Field(
        default="General follow-up call", description="Call context given to the agent"
    )


class MessageDefaults(BaseModel):
    """Default message templates."""

    enable_connection_message: bool = Field(
        default=True, description="Attach a note to connection requests"
    )
    linkedin_connection_message: str = Field(
        default="Hi {{first_name}}, I'd like to connect with you."
    )
    linkedin_message: str = Field(
        default=(
            "Hi {{first_name}}, I noticed your work in {{company}} "
            "and thought you might be interested in..."
        )
    )
    email_subject: str = Field(default="Reaching out")
    email_body: str = Field(default="Hi {{name}}, I noticed...")


class BuilderDefaults(BaseModel):
    """Defaults applied by the workflow builder."""

    model_config = ConfigDict(frozen=True)

    delay: DelayDefaults = Field(default_factory=DelayDefaults)
    condition_type: str = Field(default="connected", description="Default condition kind")
    voice: VoiceAgentDefaults = Field(default_factory=VoiceAgentDefaults)
    messages: MessageDefaults = Field(default_factory=MessageDefaults)
    leads_per_day: int = Field(default=25, gt=0, description="Daily lead generation limit")
