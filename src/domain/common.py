"""Identifier and clock helpers shared by the domain services."""

import secrets
import string
import time

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str = "id") -> str:
    """
    Generate a short random identifier such as ``tx_k3v9a0z``.

    Seven base-36 characters after the prefix.
    """
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(7))
    return f"{prefix}_{suffix}"


def now_millis() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def is_blank(value: object) -> bool:
    """True for None and empty strings, the values treated as missing input."""
    return value is None or value == ""
