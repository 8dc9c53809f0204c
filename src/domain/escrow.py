"""
Escrow ledger domain service - Transaction state machine implementation.

Escrow State Machine
====================

States:
- holding: Initial state, funds notionally held in escrow
- released: Funds released to the seller (confirm, or admin deny)
- refund_requested: Buyer disputes the transaction
- refunded: Admin approved the refund

Buyer Transitions (guarded):
    holding -> released           (confirm delivery)
    holding -> refund_requested   (request refund)
    released -> refund_requested  (request refund after release)

Admin Transitions (unguarded, any current status):
    any -> refunded  (approve_refund, stamps refunded_at)
    any -> released  (deny_refund)
    flag_bvn leaves the transaction untouched and flags the buyer's BVN.

Funds never move: the buyer's wallet is not debited on creation nor
credited on refund.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from .common import generate_id, is_blank, now_millis
from .exceptions import InvalidStateError, NotFoundError, ValidationError
from .ports import (
    AdminAction,
    FlaggedBVNRegistry,
    Transaction,
    TransactionRepository,
    TransactionStatus,
    UserRepository,
)

logger = logging.getLogger(__name__)

DEFAULT_SELLER_NAME = "Unknown Seller"

# Statuses from which each buyer-initiated transition may start.
CONFIRM_FROM = frozenset({TransactionStatus.HOLDING})
REFUND_FROM = frozenset({TransactionStatus.HOLDING, TransactionStatus.RELEASED})


@dataclass
class FlagResult:
    """Outcome of a flag_bvn review."""

    flagged: str


@dataclass
class LedgerSnapshot:
    """Whole-ledger view for the debug endpoint."""

    transactions: list[Transaction]
    users: int
    flagged_bvns: list[str]


def coerce_amount(amount: object) -> int | float:
    """
    Convert a submitted amount to a number.

    Accepts ints, floats and numeric strings. Digit-group underscores
    such as "1_000" are rejected. No sign or bound check.

    Raises:
        ValidationError: value is not a finite number
    """
    if isinstance(amount, bool):
        raise ValidationError("Invalid amount")
    if isinstance(amount, (int, float)):
        value = amount
    elif isinstance(amount, str):
        text = amount.strip()
        if "_" in text:
            raise ValidationError("Invalid amount")
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise ValidationError("Invalid amount") from None
    else:
        raise ValidationError("Invalid amount")

    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError("Invalid amount")
    return value


@dataclass
class EscrowService:
    """
    Domain service for escrow transactions and admin adjudication.

    Every guard is evaluated before the record is touched, so a failed
    call leaves the ledger unchanged.
    """

    transactions: TransactionRepository
    users: UserRepository
    flagged: FlaggedBVNRegistry
    id_factory: Callable[[str], str] = field(default=generate_id)
    clock: Callable[[], int] = field(default=now_millis)

    def create_transaction(
        self,
        buyer_email: str | None,
        seller_name: str | None,
        amount: object,
        description: str | None,
    ) -> Transaction:
        """
        Open a new escrow transaction in the holding state.

        Raises:
            ValidationError: buyer email or amount missing, or amount not numeric
            NotFoundError: buyer is not registered
        """
        if is_blank(buyer_email) or is_blank(amount):
            raise ValidationError("Missing fields")

        if self.users.get(buyer_email) is None:
            raise NotFoundError("Buyer not found")

        tx = Transaction(
            id=self.id_factory("tx"),
            buyer_email=buyer_email,
            seller_name=seller_name or DEFAULT_SELLER_NAME,
            amount=coerce_amount(amount),
            description=description or "",
            status=TransactionStatus.HOLDING,
            created_at=self.clock(),
        )
        self.transactions.add(tx)
        logger.info("Transaction %s created for %s (amount=%s)", tx.id, buyer_email, tx.amount)
        return tx

    def list_transactions(self, email: str) -> list[Transaction]:
        """Return the buyer's transactions in creation order."""
        return self.transactions.list_by_buyer(email)

    def confirm_delivery(self, tx_id: str) -> Transaction:
        """
        Release escrowed funds after the buyer confirms delivery.

        Raises:
            NotFoundError: unknown transaction
            InvalidStateError: transaction is not holding
        """
        tx = self._get(tx_id)
        if tx.status not in CONFIRM_FROM:
            raise InvalidStateError("Cannot confirm")

        tx.status = TransactionStatus.RELEASED
        tx.released_at = self.clock()
        self.transactions.save(tx)
        logger.info("Transaction %s released", tx.id)
        return tx

    def request_refund(self, tx_id: str, reason: str | None = None) -> Transaction:
        """
        Open a refund dispute.

        Raises:
            NotFoundError: unknown transaction
            InvalidStateError: transaction is neither holding nor released
        """
        tx = self._get(tx_id)
        if tx.status not in REFUND_FROM:
            raise InvalidStateError("Refund not allowed at this stage")

        tx.status = TransactionStatus.REFUND_REQUESTED
        tx.refund_reason = reason or ""
        self.transactions.save(tx)
        logger.info("Refund requested on transaction %s", tx.id)
        return tx

    def admin_review(self, tx_id: str | None, action: str | None) -> Transaction | FlagResult:
        """
        Apply an admin decision to a transaction.

        The transaction must exist whatever the action. Refund decisions are
        applied regardless of the current status.

        Raises:
            NotFoundError: unknown transaction, or buyer missing for flag_bvn
            ValidationError: action is not a known AdminAction
        """
        tx = self._get(tx_id)

        try:
            decision = AdminAction(action)
        except ValueError:
            raise ValidationError("Invalid action") from None

        if decision is AdminAction.APPROVE_REFUND:
            tx.status = TransactionStatus.REFUNDED
            tx.refunded_at = self.clock()
            self.transactions.save(tx)
            logger.info("Admin approved refund on transaction %s", tx.id)
            return tx

        if decision is AdminAction.DENY_REFUND:
            tx.status = TransactionStatus.RELEASED
            self.transactions.save(tx)
            logger.info("Admin denied refund on transaction %s", tx.id)
            return tx

        buyer = self.users.get(tx.buyer_email)
        if buyer is None:
            raise NotFoundError("Buyer not found")
        self.flagged.add(buyer.bvn)
        logger.warning("BVN %s flagged via transaction %s", buyer.bvn, tx.id)
        return FlagResult(flagged=buyer.bvn)

    def snapshot(self) -> LedgerSnapshot:
        """Everything the debug endpoint reports."""
        return LedgerSnapshot(
            transactions=self.transactions.list_all(),
            users=self.users.count(),
            flagged_bvns=self.flagged.list_all(),
        )

    def _get(self, tx_id: str | None) -> Transaction:
        tx = None if is_blank(tx_id) else self.transactions.get(tx_id)
        if tx is None:
            raise NotFoundError("Transaction not found")
        return tx
