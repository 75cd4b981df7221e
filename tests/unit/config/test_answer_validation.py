"""Tests for answer cross-field validation"""

from cadence.config import AnswerSnapshot, validate_answers


def _codes(answers: AnswerSnapshot) -> list[str]:
    return [issue.code for issue in validate_answers(answers)]


def test_consistent_answers_have_no_issues(full_answers):
    """A complete questionnaire reports nothing"""
    assert validate_answers(full_answers) == []


def test_missing_target_criteria():
    """No target criteria is reported"""
    assert _codes(AnswerSnapshot()) == ["missing_target_criteria"]


def test_message_without_connection():
    """A message without a connection request is reported"""
    # Arrange
    answers = AnswerSnapshot(
        industries=["SaaS"], platforms=["linkedin"], linkedin_actions=["send_message"]
    )

    # Act
    issues = validate_answers(answers)

    # Assert
    assert [i.code for i in issues] == ["message_without_connection"]
    assert issues[0].field == "linkedinActions"


def test_voice_after_linkedin_without_connection():
    """Gated voice timing without a connection request is reported"""
    # Arrange
    answers = AnswerSnapshot(
        industries=["SaaS"],
        platforms=["voice"],
        voice_timing="after_linkedin",
        voice_context="Follow up",
    )

    # Assert
    assert _codes(answers) == ["voice_after_linkedin_without_connection"]


def test_voice_context_missing():
    """An active voice call without context is reported"""
    # Arrange
    answers = AnswerSnapshot(industries=["SaaS"], platforms=["voice"])

    # Assert
    assert _codes(answers) == ["voice_context_missing"]


def test_disabled_voice_is_not_checked():
    """Voice issues are skipped when the call is disabled"""
    # Arrange
    answers = AnswerSnapshot(
        industries=["SaaS"],
        platforms=["voice"],
        voice_enabled=False,
        voice_timing="after_linkedin",
    )

    # Assert
    assert _codes(answers) == []
