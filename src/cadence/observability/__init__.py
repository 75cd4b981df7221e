"""Observability helpers for Cadence."""

from cadence.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
