"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.notify.console import ConsoleSupportNotifier
from src.adapters.repository.memory import InMemoryStore
from src.config.settings import get_settings
from src.domain.accounts import AccountService
from src.domain.escrow import EscrowService
from src.domain.support import SupportService

# Module-level singleton - ConsoleSupportNotifier is stateless
_support_notifier = ConsoleSupportNotifier()


def get_store(request: Request) -> InMemoryStore:
    """
    Get the in-memory store from app state.

    The store is created by the application factory and stored in app.state.
    """
    return request.app.state.store


def get_support_notifier() -> ConsoleSupportNotifier:
    """Get console support notifier (singleton)."""
    return _support_notifier


def get_account_service(request: Request) -> AccountService:
    """Create account service over the store's users and flagged numbers."""
    store = get_store(request)
    settings = get_settings()
    return AccountService(
        users=store.users,
        flagged=store.flagged,
        wallet_balance=settings.demo_wallet_balance,
        default_role=settings.default_role,
    )


def get_escrow_service(request: Request) -> EscrowService:
    """Create escrow service with injected repositories."""
    store = get_store(request)
    return EscrowService(transactions=store.transactions, users=store.users, flagged=store.flagged)


def get_support_service(request: Request) -> SupportService:
    """Create support service wired to the console notifier."""
    store = get_store(request)
    return SupportService(messages=store.support_messages, notifier=get_support_notifier())
