"""Cross-field checks on an Answer Snapshot.

The questionnaire is expected to prevent these combinations. The builder does
not repair them; it reports them so the caller can surface them to the
operator before a campaign is created.
"""

from dataclasses import dataclass

from cadence.config.answers import AnswerSnapshot
from cadence.core.constants import Channel, LinkedInAction, VoiceTiming


@dataclass(frozen=True)
class AnswerIssue:
    """A questionable answer combination."""

    field: str
    code: str
    message: str


def validate_answers(answers: AnswerSnapshot) -> list[AnswerIssue]:
    """Report answer combinations the builder will not honor.

    Args:
        answers: Snapshot to check

    Returns:
        List of issues, empty when the snapshot is consistent
    """
    issues: list[AnswerIssue] = []

    if not answers.has_target_criteria():
        issues.append(
            AnswerIssue(
                field="industries",
                code="missing_target_criteria",
                message=(
                    "No target criteria set; fill in at least one of industries, "
                    "location or roles so leads can be generated."
                ),
            )
        )

    linkedin_connect = answers.selects(Channel.LINKEDIN) and answers.wants(
        LinkedInAction.SEND_CONNECTION
    )

    if answers.wants(LinkedInAction.SEND_MESSAGE) and not answers.wants(
        LinkedInAction.SEND_CONNECTION
    ):
        issues.append(
            AnswerIssue(
                field="linkedinActions",
                code="message_without_connection",
                message=(
                    "LinkedIn messages are only sent after a connection is accepted; "
                    "select 'send_connection' or the message step is dropped."
                ),
            )
        )

    if answers.voice_active():
        if answers.voice_timing == VoiceTiming.AFTER_LINKEDIN and not linkedin_connect:
            issues.append(
                AnswerIssue(
                    field="voiceTiming",
                    code="voice_after_linkedin_without_connection",
                    message=(
                        "Voice call is set to run after LinkedIn acceptance, but no "
                        "LinkedIn connection request is configured; it will run immediately."
                    ),
                )
            )
        if not (answers.voice_context or "").strip():
            issues.append(
                AnswerIssue(
                    field="voiceContext",
                    code="voice_context_missing",
                    message="Voice agent context is empty; the default context is used.",
                )
            )

    return issues
