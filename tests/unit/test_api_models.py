"""
Unit tests for API request/response models.

Tests camelCase aliases, optional fields and serialization shapes.
"""

from src.api.models import (
    AdminReviewRequest,
    CreateTransactionRequest,
    DebugResponse,
    SignupRequest,
    TransactionResponse,
    TransactionView,
    UserResponse,
    UserView,
)
from src.domain.escrow import LedgerSnapshot
from src.domain.ports import Transaction, TransactionStatus, UserSummary


def make_tx(**overrides) -> Transaction:
    fields = dict(
        id="tx_abc",
        buyer_email="ada@example.com",
        seller_name="Shop",
        amount=500,
        description="",
        status=TransactionStatus.HOLDING,
        created_at=1000,
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestRequestModels:
    """Tests for request parsing."""

    def test_signup_all_fields_optional(self) -> None:
        request = SignupRequest()
        assert request.name is None
        assert request.bvn is None

    def test_signup_numeric_bvn_coerced_to_string(self) -> None:
        request = SignupRequest(name="Ada", email="ada@example.com", bvn=12345678901)
        assert request.bvn == "12345678901"

    def test_create_transaction_reads_camel_case(self) -> None:
        request = CreateTransactionRequest.model_validate(
            {"buyerEmail": "ada@example.com", "sellerName": "Shop", "amount": 500}
        )
        assert request.buyer_email == "ada@example.com"
        assert request.seller_name == "Shop"
        assert request.amount == 500
        assert isinstance(request.amount, int)

    def test_create_transaction_keeps_string_amount(self) -> None:
        request = CreateTransactionRequest.model_validate({"buyerEmail": "a@b.c", "amount": "500"})
        assert request.amount == "500"

    def test_admin_review_reads_tx_id(self) -> None:
        request = AdminReviewRequest.model_validate({"txId": "tx_1", "action": "flag_bvn"})
        assert request.tx_id == "tx_1"
        assert request.action == "flag_bvn"

    def test_unknown_fields_ignored(self) -> None:
        request = SignupRequest.model_validate({"name": "Ada", "role": "admin"})
        assert request.name == "Ada"


class TestResponseModels:
    """Tests for JSON shapes."""

    def test_user_response_shape(self) -> None:
        response = UserResponse(user=UserView.from_domain(UserSummary(name="Ada", email="ada@example.com", wallet=125000)))
        assert response.model_dump(by_alias=True) == {
            "ok": True,
            "user": {"name": "Ada", "email": "ada@example.com", "wallet": 125000},
        }

    def test_transaction_view_omits_unset_stage_fields(self) -> None:
        view = TransactionView.from_domain(make_tx())
        assert view.model_dump(by_alias=True, exclude_none=True) == {
            "id": "tx_abc",
            "buyerEmail": "ada@example.com",
            "sellerName": "Shop",
            "amount": 500,
            "description": "",
            "status": "holding",
            "createdAt": 1000,
        }

    def test_transaction_view_keeps_empty_refund_reason(self) -> None:
        tx = make_tx(status=TransactionStatus.REFUND_REQUESTED, refund_reason="")
        dumped = TransactionResponse(tx=TransactionView.from_domain(tx)).model_dump(by_alias=True, exclude_none=True)
        assert dumped["tx"]["refundReason"] == ""
        assert dumped["tx"]["status"] == "refund_requested"

    def test_debug_response_aliases(self) -> None:
        snapshot = LedgerSnapshot(transactions=[make_tx()], users=2, flagged_bvns=["12345678901"])
        dumped = DebugResponse.from_domain(snapshot).model_dump(by_alias=True, exclude_none=True)
        assert dumped["users"] == 2
        assert dumped["flaggedBVNs"] == ["12345678901"]
        assert dumped["transactions"][0]["id"] == "tx_abc"
