# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    The session exposes only the user id and email; the id is what
    website records store as owner_id.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None


class UserResponse(BaseModel):
    """Current user, as returned by /auth/me."""
    id: UUID
    email: Optional[str] = None
    website_count: int = 0


class TokenVerifyResponse(BaseModel):
    """Result of /auth/verify."""
    valid: bool
    user_id: str
    email: Optional[str] = None
