"""
Unit tests for the in-memory repository adapters.

Tests cover uniqueness, ordering, copy semantics and thread safety.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.adapters.repository.memory import (
    InMemoryFlaggedBVNRegistry,
    InMemoryStore,
    InMemoryTransactionRepository,
    InMemoryUserRepository,
)
from src.domain.ports import Transaction, TransactionStatus, User


def make_user(email: str = "ada@example.com", bvn: str = "12345678901") -> User:
    return User(
        id="u_1",
        name="Ada",
        email=email,
        phone=None,
        password="",
        bvn=bvn,
        verified=True,
        wallet=125000,
        role="user",
    )


def make_tx(tx_id: str, buyer: str = "ada@example.com") -> Transaction:
    return Transaction(
        id=tx_id,
        buyer_email=buyer,
        seller_name="Shop",
        amount=100,
        description="",
        status=TransactionStatus.HOLDING,
        created_at=1,
    )


class TestInMemoryUserRepository:
    """Tests for user storage."""

    def test_add_and_get(self) -> None:
        repo = InMemoryUserRepository()
        assert repo.add(make_user()) is True
        assert repo.get("ada@example.com").name == "Ada"
        assert repo.count() == 1

    def test_add_duplicate_returns_false(self) -> None:
        repo = InMemoryUserRepository()
        repo.add(make_user())
        assert repo.add(make_user()) is False
        assert repo.count() == 1

    def test_get_unknown(self) -> None:
        assert InMemoryUserRepository().get("ghost@example.com") is None

    def test_get_returns_copy(self) -> None:
        repo = InMemoryUserRepository()
        repo.add(make_user())
        repo.get("ada@example.com").wallet = 0
        assert repo.get("ada@example.com").wallet == 125000

    def test_concurrent_adds_keep_email_unique(self) -> None:
        repo = InMemoryUserRepository()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: repo.add(make_user()), range(50)))

        assert results.count(True) == 1
        assert repo.count() == 1


class TestInMemoryFlaggedBVNRegistry:
    """Tests for the flagged-number set."""

    def test_add_contains_and_order(self) -> None:
        registry = InMemoryFlaggedBVNRegistry()
        registry.add("2222222222")
        registry.add("1111111111")
        registry.add("2222222222")

        assert registry.contains("1111111111")
        assert not registry.contains("3333333333")
        assert registry.list_all() == ["2222222222", "1111111111"]


class TestInMemoryTransactionRepository:
    """Tests for transaction storage."""

    def test_list_by_buyer_preserves_order(self) -> None:
        repo = InMemoryTransactionRepository()
        repo.add(make_tx("tx_1"))
        repo.add(make_tx("tx_2", buyer="bob@example.com"))
        repo.add(make_tx("tx_3"))

        assert [tx.id for tx in repo.list_by_buyer("ada@example.com")] == ["tx_1", "tx_3"]
        assert [tx.id for tx in repo.list_all()] == ["tx_1", "tx_2", "tx_3"]

    def test_mutation_requires_save(self) -> None:
        repo = InMemoryTransactionRepository()
        repo.add(make_tx("tx_1"))

        tx = repo.get("tx_1")
        tx.status = TransactionStatus.RELEASED
        assert repo.get("tx_1").status is TransactionStatus.HOLDING

        repo.save(tx)
        assert repo.get("tx_1").status is TransactionStatus.RELEASED

    def test_save_keeps_position(self) -> None:
        repo = InMemoryTransactionRepository()
        repo.add(make_tx("tx_1"))
        repo.add(make_tx("tx_2"))

        tx = repo.get("tx_1")
        tx.status = TransactionStatus.REFUNDED
        repo.save(tx)

        assert [tx.id for tx in repo.list_all()] == ["tx_1", "tx_2"]

    def test_save_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            InMemoryTransactionRepository().save(make_tx("tx_missing"))

    def test_get_unknown(self) -> None:
        assert InMemoryTransactionRepository().get("tx_missing") is None


class TestInMemoryStore:
    """Tests for the store container."""

    def test_stores_are_independent(self) -> None:
        first = InMemoryStore()
        second = InMemoryStore()
        first.users.add(make_user())

        assert first.users.count() == 1
        assert second.users.count() == 0

    def test_support_messages_start_empty(self) -> None:
        assert InMemoryStore().support_messages.list_all() == []
