"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
JSON field names are camelCase. Request fields are all optional so that
missing values reach the domain, which reports them as 400 errors.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.escrow import LedgerSnapshot
from src.domain.ports import Transaction, UserSummary


class CamelModel(BaseModel):
    """Base model exposing snake_case fields under camelCase JSON names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class SignupRequest(CamelModel):
    """Request model for account signup."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    bvn: str | None = Field(default=None, description="10 or 11 digit verification number")


class LoginRequest(CamelModel):
    """Request model for login. No password is checked."""

    email: str | None = None


class CreateTransactionRequest(CamelModel):
    """Request model for opening an escrow transaction."""

    buyer_email: str | None = None
    seller_name: str | None = None
    amount: int | float | str | None = Field(default=None, description="Numeric amount or numeric string")
    description: str | None = None


class RefundRequest(CamelModel):
    """Request model for a refund request."""

    reason: str | None = None


class AdminReviewRequest(CamelModel):
    """Request model for admin adjudication."""

    tx_id: str | None = None
    action: str | None = Field(default=None, description="approve_refund | deny_refund | flag_bvn")


class SupportRequest(CamelModel):
    """Request model for a support message."""

    email: str | None = None
    message: str | None = None


class UserView(CamelModel):
    """Public user fields."""

    name: str
    email: str
    wallet: int | float

    @classmethod
    def from_domain(cls, user: UserSummary) -> "UserView":
        return cls(name=user.name, email=user.email, wallet=user.wallet)


class TransactionView(CamelModel):
    """Transaction as serialized to clients. Stage fields are omitted until set."""

    id: str
    buyer_email: str
    seller_name: str
    amount: int | float
    description: str
    status: str
    created_at: int
    released_at: int | None = None
    refunded_at: int | None = None
    refund_reason: str | None = None

    @classmethod
    def from_domain(cls, tx: Transaction) -> "TransactionView":
        return cls(
            id=tx.id,
            buyer_email=tx.buyer_email,
            seller_name=tx.seller_name,
            amount=tx.amount,
            description=tx.description,
            status=tx.status.value,
            created_at=tx.created_at,
            released_at=tx.released_at,
            refunded_at=tx.refunded_at,
            refund_reason=tx.refund_reason,
        )


class UserResponse(CamelModel):
    """Response model for signup and login."""

    ok: bool = True
    user: UserView


class TransactionResponse(CamelModel):
    """Response model for a single transaction."""

    ok: bool = True
    tx: TransactionView


class TransactionListResponse(CamelModel):
    """Response model for a buyer's transactions."""

    ok: bool = True
    transactions: list[TransactionView]


class FlagResponse(CamelModel):
    """Response model for a flag_bvn review."""

    ok: bool = True
    flagged: str


class SupportResponse(CamelModel):
    """Response model for a stored support message."""

    ok: bool = True
    id: str


class DebugResponse(CamelModel):
    """Whole-ledger dump for debugging."""

    transactions: list[TransactionView]
    users: int
    flagged_bvns: list[str] = Field(alias="flaggedBVNs")

    @classmethod
    def from_domain(cls, snapshot: LedgerSnapshot) -> "DebugResponse":
        return cls(
            transactions=[TransactionView.from_domain(tx) for tx in snapshot.transactions],
            users=snapshot.users,
            flagged_bvns=snapshot.flagged_bvns,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
