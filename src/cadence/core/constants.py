"""Core constants and enums."""

from enum import Enum


class Channel(str, Enum):
    """Outreach channels a campaign can use."""

    LINKEDIN = "linkedin"
    EMAIL = "email"
    WHATSAPP = "whatsapp"
    VOICE = "voice"
    INSTAGRAM = "instagram"


class LinkedInAction(str, Enum):
    """LinkedIn actions selectable in the questionnaire."""

    VISIT_PROFILE = "visit_profile"
    FOLLOW_PROFILE = "follow_profile"
    SEND_CONNECTION = "send_connection"
    SEND_MESSAGE = "send_message"


class VoiceTiming(str, Enum):
    """When the voice agent call is placed."""

    IMMEDIATE = "immediate"
    AFTER_LINKEDIN = "after_linkedin"


# Human-readable names for condition kinds, used in condition node titles
CONDITION_LABELS: dict[str, str] = {
    "connected": "LinkedIn Connection Accepted",
    "linkedin_replied": "LinkedIn Message Replied",
    "email_opened": "Email Opened",
    "email_replied": "Email Replied",
    "whatsapp_replied": "WhatsApp Message Replied",
}

TRUE_BRANCH_LABEL = "✓ YES"
FALSE_BRANCH_LABEL = "✗ NO"


def condition_label(condition_type: str) -> str:
    """Return the display label for a condition kind."""
    return CONDITION_LABELS.get(condition_type, f"If {condition_type}")
