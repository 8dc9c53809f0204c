"""
API endpoints package.

Collects the routers of the escrow API. Mounted under /api by the
application factory.
"""

from fastapi import APIRouter

from src.api.endpoints.accounts import router as accounts_router
from src.api.endpoints.admin import router as admin_router
from src.api.endpoints.debug import router as debug_router
from src.api.endpoints.support import router as support_router
from src.api.endpoints.transactions import router as transactions_router

router = APIRouter()
router.include_router(accounts_router)
router.include_router(transactions_router)
router.include_router(admin_router)
router.include_router(support_router)
router.include_router(debug_router)

__all__ = ["router"]
