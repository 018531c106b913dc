# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Actual signup/login is handled by Supabase Auth client-side.
# These routes are for getting user info after authentication.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, TokenVerifyResponse, UserResponse
from core.services.website_service import WebsiteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current authenticated user's profile.

    Includes how many websites the user owns.

    Raises:
        401: If not authenticated
    """
    _, total = WebsiteService.list_websites(owner_id=user.id, page=1, page_size=1)

    return UserResponse(id=user.id, email=user.email, website_count=total)


@router.get("/verify", response_model=TokenVerifyResponse)
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> TokenVerifyResponse:
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.

    Raises:
        401: If token is invalid or expired
    """
    return TokenVerifyResponse(valid=True, user_id=str(user.id), email=user.email)
