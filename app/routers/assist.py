# =============================================================================
# app/routers/assist.py - Copywriting Assist Endpoints
# =============================================================================
# Optional helpers shown next to the form fields:
# - POST /assist/about-text: draft an "About Us" from name and tagline
# - POST /assist/improve:    suggest a clearer version of some copy
#
# Suggestions are returned to the form only; nothing is saved.
# =============================================================================

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from agents.base import GenerationError
from app.auth import get_current_user, AuthUser
from app.dependencies import CopywriterDep
from app.exceptions import GenerationFailedError
from core.models.website import blank_to_none, require_min_length

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request / Response Models
# =============================================================================

class AboutTextRequest(BaseModel):
    """Input for drafting an About Us section."""
    store_name: str = Field(..., min_length=2, max_length=120)
    tagline: str | None = Field(default=None, max_length=200)

    @field_validator("store_name")
    @classmethod
    def _check_store_name(cls, v: str) -> str:
        return require_min_length(v, 2, "Store name")

    @field_validator("tagline")
    @classmethod
    def _optional_tagline(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class AboutTextResponse(BaseModel):
    """Drafted About Us text."""
    about_text: str


class ImproveRequest(BaseModel):
    """Copy to improve."""
    content: str = Field(..., min_length=1, max_length=5000)

    @field_validator("content")
    @classmethod
    def _check_content(cls, v: str) -> str:
        return require_min_length(v, 1, "Content")


class ImproveResponse(BaseModel):
    """Suggested replacement copy."""
    improved_content: str


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/assist/about-text", response_model=AboutTextResponse)
def generate_about_text(
    request: AboutTextRequest,
    copywriter: CopywriterDep,
    user: AuthUser = Depends(get_current_user),
):
    """
    Draft a 2-4 sentence About Us section for the store.
    """
    try:
        about_text = copywriter.generate_about_text(
            store_name=request.store_name,
            tagline=request.tagline,
        )
    except GenerationError as e:
        logger.error(f"About text generation failed for user {user.id}: {e}")
        raise GenerationFailedError()

    return AboutTextResponse(about_text=about_text)


@router.post("/assist/improve", response_model=ImproveResponse)
def improve_content(
    request: ImproveRequest,
    copywriter: CopywriterDep,
    user: AuthUser = Depends(get_current_user),
):
    """
    Suggest an improved version of a piece of website copy.
    """
    try:
        improved = copywriter.improve_content(request.content)
    except GenerationError as e:
        logger.error(f"Content improvement failed for user {user.id}: {e}")
        raise GenerationFailedError()

    return ImproveResponse(improved_content=improved)
