"""
Port interfaces - Records and Protocol definitions for storage abstraction.

This module defines the records the domain works with and the
interfaces (ports) it requires from infrastructure. Adapters implement
these protocols.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class TransactionStatus(str, Enum):
    """
    Escrow transaction lifecycle states.

    State Transitions:
    - HOLDING -> RELEASED (buyer confirms delivery)
    - HOLDING -> REFUND_REQUESTED (buyer requests refund)
    - RELEASED -> REFUND_REQUESTED (buyer requests refund after release)
    - any -> REFUNDED (admin approves refund)
    - any -> RELEASED (admin denies refund)

    Admin transitions are not guarded on the current status; they are
    meant for REFUND_REQUESTED but accept any.
    """

    HOLDING = "holding"
    RELEASED = "released"
    REFUND_REQUESTED = "refund_requested"
    REFUNDED = "refunded"


class AdminAction(str, Enum):
    """Actions accepted by the admin review endpoint."""

    APPROVE_REFUND = "approve_refund"
    DENY_REFUND = "deny_refund"
    FLAG_BVN = "flag_bvn"


@dataclass
class User:
    """Registered account. The password is stored as given and never checked."""

    id: str
    name: str
    email: str
    phone: str | None
    password: str
    bvn: str
    verified: bool
    wallet: float
    role: str


@dataclass
class UserSummary:
    """Public view of a user returned by signup and login."""

    name: str
    email: str
    wallet: float


@dataclass
class Transaction:
    """Escrow transaction. Stage fields stay None until their transition happens."""

    id: str
    buyer_email: str
    seller_name: str
    amount: float
    description: str
    status: TransactionStatus
    created_at: int
    released_at: int | None = None
    refunded_at: int | None = None
    refund_reason: str | None = None


@dataclass
class SupportMessage:
    """Write-once support message."""

    id: str
    email: str | None
    message: str | None
    ts: int


class UserRepository(Protocol):
    """Port interface for user records keyed by email."""

    def add(self, user: User) -> bool:
        """
        Atomically insert a user if the email is free.

        Returns:
            True if inserted, False if the email already exists
        """
        ...

    def get(self, email: str) -> User | None:
        """Return the user registered under email, if any."""
        ...

    def count(self) -> int:
        """Return the number of registered users."""
        ...


class FlaggedBVNRegistry(Protocol):
    """Port interface for the grow-only set of fraud-flagged numbers."""

    def add(self, bvn: str) -> None: ...

    def contains(self, bvn: str) -> bool: ...

    def list_all(self) -> list[str]:
        """Return flagged numbers in the order they were flagged."""
        ...


class TransactionRepository(Protocol):
    """Port interface for escrow transactions, kept in creation order."""

    def add(self, tx: Transaction) -> None: ...

    def get(self, tx_id: str) -> Transaction | None: ...

    def save(self, tx: Transaction) -> None:
        """Persist a transaction that was mutated by a transition."""
        ...

    def list_by_buyer(self, email: str) -> list[Transaction]:
        """Snapshot of the buyer's transactions in creation order."""
        ...

    def list_all(self) -> list[Transaction]: ...


class SupportMessageRepository(Protocol):
    """Port interface for the append-only support log."""

    def append(self, message: SupportMessage) -> None: ...

    def list_all(self) -> Sequence[SupportMessage]: ...


class SupportNotifier(Protocol):
    """Port interface for forwarding support messages to staff."""

    def notify(self, message: SupportMessage) -> None:
        """
        Forward a stored support message.

        Args:
            message: The message that was just appended to the log
        """
        ...
