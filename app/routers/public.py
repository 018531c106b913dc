# =============================================================================
# app/routers/public.py - Public Listing and Viewer
# =============================================================================
# Endpoints that work without authentication:
# - router:        GET /api/v1/public/websites   (homepage listing)
# - viewer_router: GET /sites/{id}               (viewer page)
#                  GET /sites/{id}/download      (HTML file download)
#
# is_public only decides what the homepage lists. The viewer and its
# download serve any existing website to whoever has the link, so an
# owner can share a site before publishing it.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, Response
from fastapi.responses import HTMLResponse

from app.config import settings
from core.models.website import WebsiteList, WebsiteSummary
from core.services.website_service import WebsiteService
from lib.html_utils import download_filename, render_viewer

logger = logging.getLogger(__name__)

router = APIRouter()
viewer_router = APIRouter()

WebsiteId = Annotated[str, Path(min_length=1, max_length=64, description="Website ID")]


@router.get("/public/websites", response_model=WebsiteList)
async def list_public_websites(
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=100, description="Items per page")] = None,
):
    """
    List public websites for the homepage, newest first.
    """
    page_size = page_size or settings.DEFAULT_PAGE_SIZE
    websites, total = WebsiteService.list_public_websites(page=page, page_size=page_size)

    return WebsiteList(
        websites=[WebsiteSummary.from_record(w) for w in websites],
        total=total,
        page=page,
        page_size=page_size,
    )


@viewer_router.get("/{website_id}", response_class=HTMLResponse)
async def view_website(website_id: WebsiteId):
    """
    Render the stored website inside a sandboxed iframe.

    The stored HTML is shown verbatim (scripts and same-origin allowed).
    """
    website = WebsiteService.get_website(website_id)

    title = website.get("store_name") or f"Site {website_id}"
    page = render_viewer(
        title=title,
        document=website.get("html_content") or "",
        download_url=f"/sites/{website_id}/download",
    )
    return HTMLResponse(content=page)


@viewer_router.get("/{website_id}/download")
async def download_public_website(website_id: WebsiteId):
    """
    Download the stored HTML of a website by its link.
    """
    website = WebsiteService.get_website(website_id)
    filename = download_filename(website.get("store_name"))

    return Response(
        content=website.get("html_content") or "",
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
