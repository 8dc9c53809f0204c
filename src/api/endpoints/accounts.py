"""
Account endpoints.

- POST /api/signup - Create a verified account with a demo wallet
- POST /api/login  - Look up an account by email (password is not checked)
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_account_service
from src.api.models import ErrorResponse, LoginRequest, SignupRequest, UserResponse, UserView
from src.domain.accounts import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/signup",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or invalid BVN format"},
        403: {"model": ErrorResponse, "description": "BVN is flagged for fraud"},
        409: {"model": ErrorResponse, "description": "User already exists"},
    },
    summary="Sign up",
)
async def signup(
    request_data: SignupRequest | None = None,
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    """
    Register a user. The BVN must be 10 or 11 digits and not flagged.

    - **name**, **email**, **bvn**: required
    - **phone**, **password**: optional
    """
    request_data = request_data or SignupRequest()
    user = service.register(
        request_data.name,
        request_data.email,
        request_data.phone,
        request_data.password,
        request_data.bvn,
    )
    return UserResponse(user=UserView.from_domain(user))


@router.post(
    "/login",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Log in",
)
async def login(
    request_data: LoginRequest | None = None,
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    request_data = request_data or LoginRequest()
    user = service.authenticate(request_data.email)
    return UserResponse(user=UserView.from_domain(user))
