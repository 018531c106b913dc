# =============================================================================
# core/models/website.py - Website Record Schemas
# =============================================================================
# These models define the API contract for storefront websites:
# - Product: one product or service listed on the storefront
# - WebsiteInput: the create/edit form submitted by the owner
# - WebsiteResponse / WebsiteSummary / WebsiteList: records returned to clients
# - VisibilityUpdate: public/private toggle
#
# A Website Record is the form data plus the generated HTML document,
# the owner id, timestamps and the visibility flag.
# =============================================================================

from __future__ import annotations

import re
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

# data:image/png;base64,iVBORw0...
DATA_URI_RE = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,[A-Za-z0-9+/=\s]+$")


def normalize_image_reference(value: str | None) -> str | None:
    """
    Validate an image reference.

    Accepts an http(s) URL or an inline base64 image data URI.
    Empty strings (a cleared file input) become None.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value.startswith(("http://", "https://")):
        return value
    if DATA_URI_RE.match(value):
        return value
    raise ValueError("Image must be an http(s) URL or a base64 image data URI")


def require_min_length(value: str, min_length: int, label: str) -> str:
    value = value.strip()
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters.")
    return value


def blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Product(BaseModel):
    """A product or service shown on the storefront."""

    name: str = Field(
        ...,
        max_length=200,
        description="Product name (at least 2 characters)"
    )

    price: str = Field(
        ...,
        max_length=50,
        description="Display price, free text (e.g. '$19.99')"
    )

    image: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image", "photo_data_uri", "photoDataUri"),
        description="Image URL or base64 data URI"
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return require_min_length(v, 2, "Product name")

    @field_validator("price")
    @classmethod
    def _check_price(cls, v: str) -> str:
        return require_min_length(v, 1, "Price")

    @field_validator("image")
    @classmethod
    def _check_image(cls, v: str | None) -> str | None:
        return normalize_image_reference(v)


class WebsiteInput(BaseModel):
    """
    Schema for the create / edit website form.

    Validated before any external call, so a record can never be
    generated or stored without a store name, about text and at least
    one product.

    Example:
        {
            "store_name": "The Cozy Corner Bookstore",
            "about": "A neighbourhood bookshop with a reading nook.",
            "products": [{"name": "Gift card", "price": "$25"}],
            "contact_info": "123 Main St | hello@cozy.example"
        }
    """

    store_name: str = Field(
        ...,
        max_length=120,
        validation_alias=AliasChoices("store_name", "storeName"),
    )

    tagline: str | None = Field(default=None, max_length=200)

    about: str = Field(..., max_length=5000)

    products: list[Product] = Field(
        ...,
        min_length=1,
        max_length=50,
        description="At least one product is required"
    )

    contact_info: str = Field(
        ...,
        max_length=500,
        validation_alias=AliasChoices("contact_info", "contactInfo"),
    )

    social_links: str | None = Field(
        default=None,
        max_length=500,
        validation_alias=AliasChoices("social_links", "socialLinks"),
    )

    store_hours: str | None = Field(
        default=None,
        max_length=500,
        validation_alias=AliasChoices("store_hours", "storeHours"),
    )

    header_image: str | None = Field(
        default=None,
        validation_alias=AliasChoices("header_image", "photo_data_uri", "photoDataUri"),
    )

    @field_validator("store_name")
    @classmethod
    def _check_store_name(cls, v: str) -> str:
        return require_min_length(v, 2, "Store name")

    @field_validator("about")
    @classmethod
    def _check_about(cls, v: str) -> str:
        return require_min_length(v, 10, "About section")

    @field_validator("contact_info")
    @classmethod
    def _check_contact_info(cls, v: str) -> str:
        return require_min_length(v, 10, "Contact info")

    @field_validator("tagline", "social_links", "store_hours")
    @classmethod
    def _optional_text(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("header_image")
    @classmethod
    def _check_header_image(cls, v: str | None) -> str | None:
        return normalize_image_reference(v)

    def to_record_fields(self) -> dict:
        """Column values for the websites table (JSON-safe)."""
        return self.model_dump(mode="json")


class WebsiteResponse(BaseModel):
    """Full website record, returned to the owner and used by the edit form."""

    id: str
    owner_id: str
    store_name: str
    tagline: str | None = None
    about: str
    products: list[Product] = Field(default_factory=list)
    contact_info: str
    social_links: str | None = None
    store_hours: str | None = None
    header_image: str | None = None
    html_content: str
    is_public: bool = False
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: dict) -> "WebsiteResponse":
        """Build from a database row (ids may come back as UUID strings or ints)."""
        data = dict(record)
        data["id"] = str(data["id"])
        data["owner_id"] = str(data["owner_id"])
        return cls.model_validate(data)


class WebsiteSummary(BaseModel):
    """Listing card for the dashboard and the public homepage."""

    id: str
    store_name: str
    tagline: str | None = None
    header_image: str | None = None
    is_public: bool = False
    created_at: datetime

    @classmethod
    def from_record(cls, record: dict) -> "WebsiteSummary":
        data = dict(record)
        data["id"] = str(data["id"])
        return cls.model_validate(data)


class WebsiteList(BaseModel):
    """Paginated website listing."""

    websites: list[WebsiteSummary] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=12, ge=1, le=100)


class VisibilityUpdate(BaseModel):
    """Toggle a website between public and private."""

    is_public: bool = Field(
        ...,
        validation_alias=AliasChoices("is_public", "isPublic"),
    )
