"""Support endpoint - POST /api/support."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_support_service
from src.api.models import SupportRequest, SupportResponse
from src.domain.support import SupportService

router = APIRouter(tags=["support"])


@router.post("/support", response_model=SupportResponse, summary="Send a support message")
async def submit_support_message(
    request_data: SupportRequest | None = None,
    service: SupportService = Depends(get_support_service),
) -> SupportResponse:
    request_data = request_data or SupportRequest()
    message_id = service.submit_message(request_data.email, request_data.message)
    return SupportResponse(id=message_id)
