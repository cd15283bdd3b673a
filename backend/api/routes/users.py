"""
User-related endpoints.

Provides endpoints for the current user's profile and account.
"""

from fastapi import APIRouter, Depends, Response

from modules.users.interfaces import IUserService
from modules.users.models import UpdateUserRequest, User
from shared.models import AuthenticatedUser
from ..dependencies import get_user_service
from ..middleware.auth import clear_session_cookie, get_current_user

router = APIRouter()


@router.get("/me", response_model=User)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_profile(user.id)


@router.patch("/me", response_model=User)
async def update_current_user_profile(
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Update the current user's profile.

    Returns 409 if the new email or username belongs to another account.
    """
    return await service.update_profile(user.id, request)


@router.delete("/me", response_model=User)
async def delete_current_user(
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Delete the current user's account and all of its tasks.

    Also clears the session cookie.
    """
    deleted = await service.delete_account(user.id)
    clear_session_cookie(response)
    return deleted
