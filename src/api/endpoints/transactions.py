"""
Escrow transaction endpoints.

- POST /api/transactions              - Open a transaction in escrow
- GET  /api/transactions/{email}      - List a buyer's transactions
- POST /api/transactions/{id}/confirm - Confirm delivery, release funds
- POST /api/transactions/{id}/refund  - Request a refund
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_escrow_service
from src.api.models import (
    CreateTransactionRequest,
    ErrorResponse,
    RefundRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionView,
)
from src.domain.escrow import EscrowService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post(
    "",
    response_model=TransactionResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        404: {"model": ErrorResponse, "description": "Buyer not found"},
    },
    summary="Create an escrow transaction",
)
async def create_transaction(
    request_data: CreateTransactionRequest | None = None,
    service: EscrowService = Depends(get_escrow_service),
) -> TransactionResponse:
    """
    Open a transaction in the holding state. The buyer's wallet is not debited.
    """
    request_data = request_data or CreateTransactionRequest()
    tx = service.create_transaction(
        request_data.buyer_email,
        request_data.seller_name,
        request_data.amount,
        request_data.description,
    )
    return TransactionResponse(tx=TransactionView.from_domain(tx))


@router.get(
    "/{email}",
    response_model=TransactionListResponse,
    response_model_exclude_none=True,
    summary="List a buyer's transactions",
)
async def list_transactions(
    email: str,
    service: EscrowService = Depends(get_escrow_service),
) -> TransactionListResponse:
    transactions = service.list_transactions(email)
    return TransactionListResponse(transactions=[TransactionView.from_domain(tx) for tx in transactions])


@router.post(
    "/{tx_id}/confirm",
    response_model=TransactionResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Transaction is not holding"},
        404: {"model": ErrorResponse, "description": "Transaction not found"},
    },
    summary="Confirm delivery",
)
async def confirm_delivery(
    tx_id: str,
    service: EscrowService = Depends(get_escrow_service),
) -> TransactionResponse:
    tx = service.confirm_delivery(tx_id)
    return TransactionResponse(tx=TransactionView.from_domain(tx))


@router.post(
    "/{tx_id}/refund",
    response_model=TransactionResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Refund not allowed at this stage"},
        404: {"model": ErrorResponse, "description": "Transaction not found"},
    },
    summary="Request a refund",
)
async def request_refund(
    tx_id: str,
    request_data: RefundRequest | None = None,
    service: EscrowService = Depends(get_escrow_service),
) -> TransactionResponse:
    """
    Move a holding or released transaction to refund_requested.

    - **reason**: optional, stored as an empty string when absent
    """
    reason = request_data.reason if request_data is not None else None
    tx = service.request_refund(tx_id, reason)
    return TransactionResponse(tx=TransactionView.from_domain(tx))
