# =============================================================================
# app/routers/uploads.py - Image Upload Endpoints
# =============================================================================
# Uploads header and product images to Supabase Storage.
# The returned URL is what the form puts in header_image / products[].image.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, UploadFile
from pydantic import BaseModel

from app.auth import get_current_user, AuthUser
from app.exceptions import ImageAccessDeniedError
from core.services.storage_service import StorageService
from lib.utils import normalize_id

logger = logging.getLogger(__name__)

router = APIRouter()


class ImageUploadResponse(BaseModel):
    """Uploaded image location."""
    path: str
    url: str
    content_type: str
    size_bytes: int


@router.post("/uploads/images", response_model=ImageUploadResponse, status_code=201)
async def upload_image(
    file: Annotated[UploadFile, File(description="PNG or JPEG image")],
    purpose: Annotated[str, Query(description="Image slot: header or product")] = "product",
    user: AuthUser = Depends(get_current_user),
):
    """
    Upload an image.

    This endpoint:
    1. Validates the purpose, content type and size
    2. Stores the image under the caller's folder
    3. Returns a public URL for use in the website form
    """
    content = await file.read()

    logger.info(f"Processing image upload: {file.filename} ({len(content)} bytes, purpose={purpose})")

    path, url = StorageService.upload_image(
        user_id=user.id,
        purpose=purpose,
        content=content,
        content_type=file.content_type,
    )

    return ImageUploadResponse(
        path=path,
        url=url,
        content_type=(file.content_type or "").split(";")[0].strip().lower(),
        size_bytes=len(content),
    )


@router.delete("/uploads/images")
async def delete_image(
    path: Annotated[str, Query(min_length=1, description="Storage path returned by the upload")],
    user: AuthUser = Depends(get_current_user),
):
    """
    Delete a previously uploaded image.

    Only paths inside the caller's own folder can be deleted.
    """
    user_prefix = f"users/{normalize_id(user.id)}/"
    if not path.startswith(user_prefix) or ".." in path:
        raise ImageAccessDeniedError(path)

    deleted = StorageService.delete_file(path)
    return {"path": path, "deleted": deleted}
