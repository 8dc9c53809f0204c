"""
Admin endpoints.

- POST /api/admin/review - approve_refund | deny_refund | flag_bvn

No authorization check: any caller can review.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_escrow_service
from src.api.models import (
    AdminReviewRequest,
    ErrorResponse,
    FlagResponse,
    TransactionResponse,
    TransactionView,
)
from src.domain.escrow import EscrowService, FlagResult

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/review",
    response_model=TransactionResponse | FlagResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid action"},
        404: {"model": ErrorResponse, "description": "Transaction or buyer not found"},
    },
    summary="Review a transaction",
)
async def review(
    request_data: AdminReviewRequest | None = None,
    service: EscrowService = Depends(get_escrow_service),
) -> TransactionResponse | FlagResponse:
    """
    Apply an admin decision.

    - **approve_refund**: status becomes refunded, refundedAt stamped
    - **deny_refund**: status becomes released
    - **flag_bvn**: the buyer's BVN is blocked from future signups
    """
    request_data = request_data or AdminReviewRequest()
    outcome = service.admin_review(request_data.tx_id, request_data.action)
    if isinstance(outcome, FlagResult):
        return FlagResponse(flagged=outcome.flagged)
    return TransactionResponse(tx=TransactionView.from_domain(outcome))
