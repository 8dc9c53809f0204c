"""Repository adapters - In-memory storage implementations."""

from .memory import (
    InMemoryFlaggedBVNRegistry,
    InMemoryStore,
    InMemorySupportMessageRepository,
    InMemoryTransactionRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryFlaggedBVNRegistry",
    "InMemoryStore",
    "InMemorySupportMessageRepository",
    "InMemoryTransactionRepository",
    "InMemoryUserRepository",
]
