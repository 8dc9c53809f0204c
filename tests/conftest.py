"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fresh in-memory store per test
- Domain services wired to that store
- Test client over a full application
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryStore
from src.api.main import create_app
from src.config.settings import Settings
from src.domain.accounts import AccountService
from src.domain.escrow import EscrowService

VALID_BVN = "12345678901"


class FakeClock:
    """Deterministic epoch-millisecond clock that advances on every call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh, empty store for each test."""
    return InMemoryStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def accounts(store: InMemoryStore) -> AccountService:
    return AccountService(users=store.users, flagged=store.flagged)


@pytest.fixture
def escrow(store: InMemoryStore, clock: FakeClock) -> EscrowService:
    return EscrowService(
        transactions=store.transactions,
        users=store.users,
        flagged=store.flagged,
        clock=clock,
    )


@pytest.fixture
def buyer(accounts: AccountService) -> str:
    """Register a buyer and return their email."""
    accounts.register("Ada Buyer", "ada@example.com", "08030000000", "secret", VALID_BVN)
    return "ada@example.com"


@pytest.fixture
def app(store: InMemoryStore) -> FastAPI:
    """Full application over the per-test store, without static assets."""
    settings = Settings(static_dir="does-not-exist")
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
