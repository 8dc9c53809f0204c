"""
Account registry domain service.

Users sign up with a BVN-style verification number. Verification is
simulated: the number only has to be 10 or 11 digits and must not be on
the fraud-flagged list. Every account is created verified with a demo
wallet balance.

Known gap: passwords are stored as given and authenticate() never
compares them. Login is a plain lookup by email.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from .common import generate_id, is_blank
from .exceptions import ConflictError, FraudBlockedError, NotFoundError, ValidationError
from .ports import FlaggedBVNRegistry, User, UserRepository, UserSummary

logger = logging.getLogger(__name__)

BVN_PATTERN = re.compile(r"[0-9]{10,11}")

DEFAULT_WALLET_BALANCE = 125000
DEFAULT_ROLE = "user"


@dataclass
class AccountService:
    """
    Domain service for signup and login.

    Check order on signup matters for the status a client sees:
    missing fields, then flagged number, then format, then duplicate email.
    """

    users: UserRepository
    flagged: FlaggedBVNRegistry
    wallet_balance: int = DEFAULT_WALLET_BALANCE
    default_role: str = DEFAULT_ROLE
    id_factory: Callable[[str], str] = field(default=generate_id)

    def register(
        self,
        name: str | None,
        email: str | None,
        phone: str | None,
        password: str | None,
        bvn: str | None,
    ) -> UserSummary:
        """
        Register a new verified user.

        Raises:
            ValidationError: name, email or bvn missing, or bvn badly formatted
            FraudBlockedError: bvn has been flagged by an admin
            ConflictError: email already registered
        """
        if is_blank(name) or is_blank(email) or is_blank(bvn):
            raise ValidationError("Missing fields")

        if self.flagged.contains(bvn):
            logger.warning("Signup rejected for flagged BVN: %s", bvn)
            raise FraudBlockedError("This BVN is flagged for fraud")

        if not BVN_PATTERN.fullmatch(bvn):
            raise ValidationError("Invalid BVN format")

        user = User(
            id=self.id_factory("u"),
            name=name,
            email=email,
            phone=phone,
            password=password or "",
            bvn=bvn,
            verified=True,
            wallet=self.wallet_balance,
            role=self.default_role,
        )
        if not self.users.add(user):
            raise ConflictError("User already exists")

        logger.info("Registered user %s (%s)", user.id, email)
        return self._summary(user)

    def authenticate(self, email: str | None) -> UserSummary:
        """
        Look up a user by email.

        Raises:
            NotFoundError: no user under that email
        """
        user = None if is_blank(email) else self.users.get(email)
        if user is None:
            raise NotFoundError("User not found")
        return self._summary(user)

    def _summary(self, user: User) -> UserSummary:
        return UserSummary(name=user.name, email=user.email, wallet=user.wallet)
