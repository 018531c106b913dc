# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .website_service import WebsiteService
from .storage_service import StorageService, UPLOAD_PURPOSES

__all__ = [
    "WebsiteService",
    "StorageService",
    "UPLOAD_PURPOSES",
]
