"""Custom exception hierarchy for the studio cost estimator."""

from __future__ import annotations


class StudioCostError(Exception):
    """Base exception for all studio cost estimator errors."""


class InputValidationError(StudioCostError, ValueError):
    """Raised when a project input is rejected.

    The offending field name is kept on ``field`` so callers can point
    the user at the exact input that needs fixing.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ConfigurationError(StudioCostError):
    """Raised when a pricing configuration cannot be loaded."""
