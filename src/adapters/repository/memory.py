"""
In-memory repository adapters - Implement the domain storage protocols.

State lives for the lifetime of the process only. Each collection owns
one lock guarding its mutations and snapshots. Records are copied on the
way in and on the way out, so callers only change stored state through
add()/save().
"""

import logging
import threading
from dataclasses import dataclass, field, replace

from src.domain.ports import SupportMessage, Transaction, User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by email.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> bool:
        """Insert user unless the email is taken; check and insert are atomic."""
        with self._lock:
            if user.email in self._users:
                return False
            self._users[user.email] = replace(user)
            return True

    def get(self, email: str) -> User | None:
        with self._lock:
            user = self._users.get(email)
            return replace(user) if user is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._users)


class InMemoryFlaggedBVNRegistry:
    """Implements FlaggedBVNRegistry protocol. Grow-only, insertion ordered."""

    def __init__(self) -> None:
        # dict keys double as an ordered set
        self._flagged: dict[str, None] = {}
        self._lock = threading.Lock()

    def add(self, bvn: str) -> None:
        with self._lock:
            self._flagged[bvn] = None

    def contains(self, bvn: str) -> bool:
        with self._lock:
            return bvn in self._flagged

    def list_all(self) -> list[str]:
        with self._lock:
            return list(self._flagged)


class InMemoryTransactionRepository:
    """
    Implements TransactionRepository protocol.

    Transactions are kept in a list to preserve creation order, with an
    id index for lookups.
    """

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._index: dict[str, int] = {}
        self._lock = threading.Lock()

    def add(self, tx: Transaction) -> None:
        with self._lock:
            self._index[tx.id] = len(self._transactions)
            self._transactions.append(replace(tx))

    def get(self, tx_id: str) -> Transaction | None:
        with self._lock:
            position = self._index.get(tx_id)
            if position is None:
                return None
            return replace(self._transactions[position])

    def save(self, tx: Transaction) -> None:
        """
        Replace the stored copy of a transaction.

        Raises:
            KeyError: transaction was never added
        """
        with self._lock:
            position = self._index[tx.id]
            self._transactions[position] = replace(tx)

    def list_by_buyer(self, email: str) -> list[Transaction]:
        with self._lock:
            return [replace(tx) for tx in self._transactions if tx.buyer_email == email]

    def list_all(self) -> list[Transaction]:
        with self._lock:
            return [replace(tx) for tx in self._transactions]


class InMemorySupportMessageRepository:
    """Implements SupportMessageRepository protocol as an append-only list."""

    def __init__(self) -> None:
        self._messages: list[SupportMessage] = []
        self._lock = threading.Lock()

    def append(self, message: SupportMessage) -> None:
        with self._lock:
            self._messages.append(replace(message))

    def list_all(self) -> list[SupportMessage]:
        with self._lock:
            return [replace(message) for message in self._messages]


@dataclass
class InMemoryStore:
    """
    Service context owning every collection of the application.

    Created once per application (see the API lifespan) and injected
    into the domain services, so each test can work on a fresh store.
    """

    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    transactions: InMemoryTransactionRepository = field(default_factory=InMemoryTransactionRepository)
    flagged: InMemoryFlaggedBVNRegistry = field(default_factory=InMemoryFlaggedBVNRegistry)
    support_messages: InMemorySupportMessageRepository = field(
        default_factory=InMemorySupportMessageRepository
    )

    def __post_init__(self) -> None:
        logger.debug("In-memory store initialized")
