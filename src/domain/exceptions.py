"""
Domain exceptions - Semantic error types for the escrow ledger.

This module defines domain-specific exceptions that communicate
business rule violations without leaking HTTP details. The API layer
maps each type onto a status code.
"""


class EscrowError(Exception):
    """Base class for escrow domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EscrowError):
    """Required input missing or malformed."""

    pass


class ConflictError(EscrowError):
    """Unique key (email) already registered."""

    pass


class FraudBlockedError(EscrowError):
    """Verification number is on the flagged list."""

    pass


class NotFoundError(EscrowError):
    """Referenced user or transaction does not exist."""

    pass


class InvalidStateError(EscrowError):
    """Transition guard failed for the transaction's current status."""

    pass
