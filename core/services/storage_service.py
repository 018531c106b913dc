# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles image uploads for store header and product photos.
#
# Files are stored per user and per purpose:
#   users/{user_id}/{purpose}/{random}.{ext}
# and served from a public bucket, so the returned URL can be embedded
# directly in the generated page.
# =============================================================================

import logging
import uuid
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import normalize_id
from app.config import settings
from app.exceptions import (
    ImageTooLargeError,
    InvalidImageTypeError,
    InvalidUploadPurposeError,
    StorageUploadError,
)

logger = logging.getLogger(__name__)

# Image slots a file can be uploaded for
UPLOAD_PURPOSES = ["header", "product"]

EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class StorageService:
    """
    Service for Supabase Storage operations.

    Validates and uploads images, returning a public URL.
    """

    @staticmethod
    def build_path(user_id: UUID | str, purpose: str, content_type: str) -> str:
        """
        Build a unique storage path for an upload.

        Example:
            build_path(user.id, "product", "image/png")
            # "users/550e8400-.../product/3f2b....png"
        """
        ext = EXTENSIONS.get(content_type, "")
        return f"users/{normalize_id(user_id)}/{purpose}/{uuid.uuid4().hex}{ext}"

    @staticmethod
    def validate_image(
        purpose: str,
        content: bytes,
        content_type: str | None,
    ) -> str:
        """
        Check purpose, content type and size.

        Returns:
            Normalized content type

        Raises:
            InvalidUploadPurposeError, InvalidImageTypeError, ImageTooLargeError
        """
        if purpose not in UPLOAD_PURPOSES:
            raise InvalidUploadPurposeError(purpose, UPLOAD_PURPOSES)

        normalized_type = (content_type or "").split(";")[0].strip().lower()
        if normalized_type not in settings.allowed_image_types_list:
            raise InvalidImageTypeError(content_type, settings.allowed_image_types_list)

        if len(content) > settings.max_image_size_bytes:
            raise ImageTooLargeError(len(content) / (1024 * 1024), settings.MAX_IMAGE_SIZE_MB)

        return normalized_type

    @staticmethod
    def upload_image(
        user_id: UUID | str,
        purpose: str,
        content: bytes,
        content_type: str | None,
    ) -> tuple[str, str]:
        """
        Upload an image to Supabase Storage.

        Args:
            user_id: Owner of the upload
            purpose: "header" or "product"
            content: Image bytes
            content_type: MIME type reported by the client

        Returns:
            Tuple of (storage path, public URL)

        Raises:
            InvalidUploadPurposeError, InvalidImageTypeError, ImageTooLargeError
            StorageUploadError: If upload fails
        """
        normalized_type = StorageService.validate_image(purpose, content, content_type)
        path = StorageService.build_path(user_id, purpose, normalized_type)

        try:
            bucket = SupabaseClient.get_client().storage.from_(settings.STORAGE_BUCKET)
            bucket.upload(
                path=path,
                file=content,
                file_options={"content-type": normalized_type, "upsert": "false"}
            )
            url = bucket.get_public_url(path)

        except Exception as e:
            logger.error(f"Storage upload failed for {path}: {e}")
            raise StorageUploadError()

        logger.info(f"Uploaded image to storage: {path} ({len(content)} bytes)")
        return path, url

    @staticmethod
    def delete_file(storage_path: str) -> bool:
        """
        Delete a file from storage.

        Returns:
            True if deleted successfully
        """
        client = SupabaseClient.get_client()

        try:
            client.storage.from_(settings.STORAGE_BUCKET).remove([storage_path])
            logger.info(f"Deleted file from storage: {storage_path}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete file: {e}")
            return False
