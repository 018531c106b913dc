# =============================================================================
# app/routers/websites.py - Website CRUD Endpoints
# =============================================================================
# Owner-facing endpoints behind the create, edit and dashboard screens.
# All endpoints require authentication; changes require ownership.
#
# Handlers that make the generation call are plain `def` so FastAPI runs
# them in its threadpool while the model call blocks.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status
from pydantic import BaseModel, Field

from app.auth import get_current_user, AuthUser
from app.config import settings
from app.dependencies import SiteGeneratorDep
from core.models.website import (
    VisibilityUpdate,
    WebsiteInput,
    WebsiteList,
    WebsiteResponse,
    WebsiteSummary,
)
from core.services.website_service import WebsiteService
from lib.html_utils import download_filename

logger = logging.getLogger(__name__)

router = APIRouter()

WebsiteId = Annotated[str, Path(min_length=1, max_length=64, description="Website ID")]


# =============================================================================
# Response Models
# =============================================================================

class WebsiteDeleteResponse(BaseModel):
    """Response when deleting a website."""
    website_id: str = Field(..., examples=["8c1f4a52-6d0e-4b4c-9f3a-2f6b1e7d9a10"])
    message: str = Field(default="Website deleted successfully")


# =============================================================================
# Endpoints
# =============================================================================

@router.post("", response_model=WebsiteResponse, status_code=status.HTTP_201_CREATED)
def create_website(
    site: WebsiteInput,
    generator: SiteGeneratorDep,
    user: AuthUser = Depends(get_current_user),
):
    """
    Generate and save a new website.

    This endpoint:
    1. Validates the form (store name, about text, at least one product)
    2. Sends the store details to the site generator
    3. Saves the returned HTML as a new private website record

    If generation fails nothing is saved and a generic error is returned.
    """
    website = WebsiteService.create_website(
        owner_id=user.id,
        site=site,
        generator=generator,
    )
    return WebsiteResponse.from_record(website)


@router.get("", response_model=WebsiteList)
async def list_websites(
    user: AuthUser = Depends(get_current_user),
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=100, description="Items per page")] = None,
):
    """
    List the caller's websites (dashboard), newest first.
    """
    page_size = page_size or settings.DEFAULT_PAGE_SIZE
    websites, total = WebsiteService.list_websites(
        owner_id=user.id,
        page=page,
        page_size=page_size,
    )

    return WebsiteList(
        websites=[WebsiteSummary.from_record(w) for w in websites],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{website_id}", response_model=WebsiteResponse)
async def get_website(
    website_id: WebsiteId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Get a website with all its form fields (used to prefill the edit form).

    User must own the website.
    """
    website = WebsiteService.get_website(website_id, user_id=user.id)
    return WebsiteResponse.from_record(website)


@router.put("/{website_id}", response_model=WebsiteResponse)
def update_website(
    website_id: WebsiteId,
    site: WebsiteInput,
    generator: SiteGeneratorDep,
    user: AuthUser = Depends(get_current_user),
):
    """
    Save the edited form and regenerate the website.

    The stored HTML is overwritten only if generation succeeds.
    User must own the website.
    """
    website = WebsiteService.update_website(
        website_id=website_id,
        user_id=user.id,
        site=site,
        generator=generator,
    )
    return WebsiteResponse.from_record(website)


@router.patch("/{website_id}/visibility", response_model=WebsiteResponse)
async def set_visibility(
    website_id: WebsiteId,
    request: VisibilityUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Make a website public or private.

    Does not regenerate or otherwise change the website.
    User must own the website.
    """
    website = WebsiteService.set_visibility(
        website_id=website_id,
        user_id=user.id,
        is_public=request.is_public,
    )
    return WebsiteResponse.from_record(website)


@router.delete("/{website_id}", response_model=WebsiteDeleteResponse)
async def delete_website(
    website_id: WebsiteId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Delete a website.

    It is removed from the dashboard and, if it was public, from the
    public listing. User must own the website.
    """
    WebsiteService.delete_website(website_id, user_id=user.id)
    return WebsiteDeleteResponse(website_id=website_id)


@router.get("/{website_id}/download")
async def download_website(
    website_id: WebsiteId,
    user: AuthUser = Depends(get_current_user),
):
    """
    Download the generated HTML as a file.

    User must own the website.
    """
    website = WebsiteService.get_website(website_id, user_id=user.id)
    filename = download_filename(website.get("store_name"))

    return Response(
        content=website["html_content"],
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
