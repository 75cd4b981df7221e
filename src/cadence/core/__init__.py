"""Core primitives shared across Cadence."""

from cadence.core.errors import (
    CadenceError,
    CampaignValidationError,
    ConfigurationError,
    FlattenError,
    GraphBuildError,
    GraphValidationError,
)

__all__ = [
    "CadenceError",
    "CampaignValidationError",
    "ConfigurationError",
    "FlattenError",
    "GraphBuildError",
    "GraphValidationError",
]
