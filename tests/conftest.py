"""Shared fixtures for Cadence tests."""

from typing import Any

import pytest

from cadence.config import AnswerSnapshot, BuilderDefaults


@pytest.fixture
def make_answers():
    """
    Factory fixture to create answer snapshots from questionnaire keys.

    Usage:
        def test_something(make_answers):
            answers = make_answers(platforms=["email"], industries=["SaaS"])
    """

    def _create(**answers: Any) -> AnswerSnapshot:
        return AnswerSnapshot.model_validate(answers)

    return _create


@pytest.fixture
def full_answers() -> AnswerSnapshot:
    """Snapshot using every channel and every LinkedIn action."""
    return AnswerSnapshot.model_validate(
        {
            "industries": ["SaaS", "Finance"],
            "location": "Germany",
            "roles": ["CEO", "CTO"],
            "platforms": ["linkedin", "email", "whatsapp", "voice"],
            "linkedinActions": [
                "visit_profile",
                "follow_profile",
                "send_connection",
                "send_message",
            ],
            "linkedinMessage": "Thanks for connecting, {{first_name}}!",
            "emailSubject": "Quick question",
            "emailMessage": "Hi {{name}}, do you have 10 minutes?",
            "voiceTiming": "after_linkedin",
            "voiceAgentId": "42",
            "voiceAgentName": "Closer",
            "voiceContext": "Book a demo",
            "delayDays": 3,
            "delayHours": 4,
            "delayMinutes": 5,
            "conditionType": "linkedin_replied",
            "campaignName": "Q3 founders",
            "dailyLeadVolume": 40,
        }
    )


@pytest.fixture
def defaults() -> BuilderDefaults:
    return BuilderDefaults()
