"""Debug endpoint - GET /api/debug/transactions dumps the whole ledger."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_escrow_service
from src.api.models import DebugResponse
from src.domain.escrow import EscrowService

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get(
    "/transactions",
    response_model=DebugResponse,
    response_model_exclude_none=True,
    summary="Dump all transactions, the user count and flagged BVNs",
)
async def debug_transactions(service: EscrowService = Depends(get_escrow_service)) -> DebugResponse:
    return DebugResponse.from_domain(service.snapshot())
