"""
Error taxonomy for the argumentation service.

Validation failures and missing resources are distinct outcomes so callers can
tell a bad request from a missing entity. Storage faults are not wrapped:
`sqlalchemy.exc.SQLAlchemyError` propagates as-is.
"""

from __future__ import annotations


class ArgumentationError(Exception):
    """Base class for failures raised by the core."""


class ValidationFailure(ArgumentationError):
    """A required input is missing, blank or out of bounds. Raised before any write."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFound(ArgumentationError):
    """A referenced topic, statement or argument does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")
