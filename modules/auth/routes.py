"""
Signup and login endpoints.

Both are public; they are the only way to obtain a bearer token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, SignupRequest

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    Returns a token together with the public user fields.
    409 if the email is already registered.
    """
    return await service.signup(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a fresh token.

    Earlier tokens for the same user stay valid until they expire.
    """
    return await service.login(request)
