"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account registry, the escrow transaction
state machine with its admin adjudication, and support intake. It
defines its own port interfaces for storage abstraction.
"""

from .accounts import AccountService
from .escrow import EscrowService, FlagResult, LedgerSnapshot
from .exceptions import (
    ConflictError,
    EscrowError,
    FraudBlockedError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from .ports import (
    AdminAction,
    FlaggedBVNRegistry,
    SupportMessage,
    SupportMessageRepository,
    SupportNotifier,
    Transaction,
    TransactionRepository,
    TransactionStatus,
    User,
    UserRepository,
    UserSummary,
)
from .support import SupportService

__all__ = [
    "AccountService",
    "AdminAction",
    "ConflictError",
    "EscrowError",
    "EscrowService",
    "FlagResult",
    "FlaggedBVNRegistry",
    "FraudBlockedError",
    "InvalidStateError",
    "LedgerSnapshot",
    "NotFoundError",
    "SupportMessage",
    "SupportMessageRepository",
    "SupportNotifier",
    "SupportService",
    "Transaction",
    "TransactionRepository",
    "TransactionStatus",
    "User",
    "UserRepository",
    "UserSummary",
    "ValidationError",
]
