"""Configuration module for Cadence."""

from cadence.config.answers import AnswerSnapshot, DelaySpec, VoiceAgentSpec
from cadence.config.loader import AnswersLoader
from cadence.config.settings import BuilderDefaults
from cadence.config.validation import AnswerIssue, validate_answers

__all__ = [
    "AnswerIssue",
    "AnswerSnapshot",
    "AnswersLoader",
    "BuilderDefaults",
    "DelaySpec",
    "VoiceAgentSpec",
    "validate_answers",
]
