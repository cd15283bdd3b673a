"""
Session authentication.

Carries the signed session token between client and server. Browsers send
it in an HTTP-only cookie; other clients may send it as a bearer token.
"""

from typing import Optional
from fastapi import Depends, Request, Response
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser
from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service

# Bearer token extractor (fallback for non-browser clients)
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    settings: Settings,
) -> Optional[str]:
    """Return the session token from the cookie, else from the bearer header."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def set_session_cookie(response: Response, token: str, settings: Optional[Settings] = None) -> None:
    """
    Attach the session cookie.

    The cookie is HTTP-only, restricted to same-site requests, secure in
    production, and expires with the token.
    """
    settings = settings or get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.jwt_expires_minutes * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def clear_session_cookie(response: Response, settings: Optional[Settings] = None) -> None:
    """Tell the client to drop the session cookie."""
    settings = settings or get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_token(request, credentials, get_settings())
    if not token:
        raise MissingTokenError()

    return await auth.verify_token(token)
