"""
Auth API endpoints.

Provides register, login and profile endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, CredentialsRequest, ProfileResponse

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: CredentialsRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new user.

    Returns a session token so the client is signed in right away.
    """
    return await service.register(request.email, request.password)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: CredentialsRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Log in with email and password.
    """
    return await service.login(request.email, request.password)


@router.get("/profile", response_model=ProfileResponse)
async def profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return ProfileResponse(user=await service.get_profile(user))
