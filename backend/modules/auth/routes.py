"""
Authentication API endpoints.

Register, login and logout. The session token is set as an HTTP-only
cookie and never returned in the body.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import clear_session_cookie, get_current_user, set_session_cookie
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, LogoutResponse, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new user.

    Returns 409 if the email or username is already taken.
    """
    result = await service.register(request)
    set_session_cookie(response, result.access_token)
    return AuthResponse(user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with email and password.

    Returns 401 with the same message whether the email is unknown or
    the password is wrong.
    """
    result = await service.login(request)
    set_session_cookie(response, result.access_token)
    return AuthResponse(user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> LogoutResponse:
    """
    Sign out by clearing the session cookie.

    The token itself stays valid until it expires; there is no
    server-side revocation.
    """
    result = await service.logout(user)
    clear_session_cookie(response)
    return result


@router.get("/me", response_model=AuthenticatedUser)
async def me(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
    """Return the identity bound to the current session."""
    return user
