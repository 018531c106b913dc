# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - website.py: website form, product, record and listing schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .website import (
    Product,
    VisibilityUpdate,
    WebsiteInput,
    WebsiteList,
    WebsiteResponse,
    WebsiteSummary,
    normalize_image_reference,
)

__all__ = [
    "Product",
    "VisibilityUpdate",
    "WebsiteInput",
    "WebsiteList",
    "WebsiteResponse",
    "WebsiteSummary",
    "normalize_image_reference",
]
