"""Exception hierarchy for Cadence.

All errors inherit from CadenceError so callers can catch everything the
package raises in one place. Keyword arguments passed to an error are kept in
``context`` and rendered after the message.
"""

from typing import Any


class CadenceError(Exception):
    """Base class for all Cadence errors."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(CadenceError):
    """Raised when an answer or defaults file cannot be loaded."""


class GraphBuildError(CadenceError):
    """Raised when the builder emits a graph that breaks its own invariants."""


class GraphValidationError(CadenceError):
    """Raised when a workflow graph breaks a structural invariant."""


class FlattenError(CadenceError):
    """Raised when a graph cannot be linearized into steps."""


class CampaignValidationError(CadenceError):
    """Raised when a campaign draft is missing required content."""
