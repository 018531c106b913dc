# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Errors fall into four groups:
# - validation (422/400/413): rendered inline next to the offending field
# - authorization (403): caller is not the record owner
# - not found (404): missing website record
# - generic failure (500/502): upstream or database problems, no detail leaked
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class StorefrontException(Exception):
    """
    Base exception for the Storefront API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "STOREFRONT_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Website Record Exceptions
# =============================================================================

class WebsiteNotFoundError(StorefrontException):
    """Raised when a website ID doesn't exist (or is private to someone else)."""

    def __init__(self, website_id: str):
        super().__init__(
            message=f"Website not found: {website_id}",
            code="WEBSITE_NOT_FOUND",
            status_code=404,
            suggestion="Check the link or return to your dashboard",
            details={"website_id": website_id}
        )


class WebsiteAccessDeniedError(StorefrontException):
    """Raised when the caller does not own the website they are changing."""

    def __init__(self, website_id: str):
        super().__init__(
            message="You do not have permission to modify this website",
            code="WEBSITE_ACCESS_DENIED",
            status_code=403,
            suggestion="Only the owner of a website can edit, download or delete it",
            details={"website_id": website_id}
        )


class GenerationFailedError(StorefrontException):
    """Raised when the generation call fails or returns no content."""

    def __init__(self):
        super().__init__(
            message="Something went wrong while generating your website. Please try again.",
            code="GENERATION_FAILED",
            status_code=502,
        )


class WebsiteSaveError(StorefrontException):
    """Raised when a website record cannot be written to the database."""

    def __init__(self):
        super().__init__(
            message="Your website could not be saved. Please try again.",
            code="WEBSITE_SAVE_FAILED",
            status_code=500,
        )


class DatabaseError(StorefrontException):
    """Raised when a read from the database fails."""

    def __init__(self):
        super().__init__(
            message="The request could not be completed. Please try again.",
            code="DATABASE_ERROR",
            status_code=500,
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidImageTypeError(StorefrontException):
    """Raised when uploaded image type is not allowed."""

    def __init__(self, content_type: str | None, allowed: list[str]):
        super().__init__(
            message=f"Invalid image type: {content_type or 'unknown'}",
            code="INVALID_IMAGE_TYPE",
            status_code=400,
            suggestion=f"Only these image types are supported: {', '.join(allowed)}",
            details={"content_type": content_type, "allowed_types": allowed}
        )


class InvalidUploadPurposeError(StorefrontException):
    """Raised when the upload purpose is not one of the known image slots."""

    def __init__(self, purpose: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid upload purpose: {purpose}",
            code="INVALID_UPLOAD_PURPOSE",
            status_code=400,
            suggestion=f"Use one of: {', '.join(allowed)}",
            details={"purpose": purpose, "allowed": allowed}
        )


class ImageTooLargeError(StorefrontException):
    """Raised when uploaded image exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"Image too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="IMAGE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload an image smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class ImageAccessDeniedError(StorefrontException):
    """Raised when deleting an image outside the caller's own folder."""

    def __init__(self, path: str):
        super().__init__(
            message="You do not have permission to delete this image",
            code="IMAGE_ACCESS_DENIED",
            status_code=403,
            details={"path": path}
        )


class StorageUploadError(StorefrontException):
    """Raised when image upload to storage fails."""

    def __init__(self):
        super().__init__(
            message="Failed to upload image. Please try again.",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def storefront_exception_handler(
    request: Request,
    exc: StorefrontException
) -> JSONResponse:
    """
    Convert StorefrontException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Returns one entry per failing field so the form can render
    messages inline.
    """
    errors = [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
