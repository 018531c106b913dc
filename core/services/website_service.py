# =============================================================================
# core/services/website_service.py - Website Record Business Logic
# =============================================================================
# Handles the lifecycle of generated websites:
#   create (generate -> insert), read, list, edit (regenerate -> overwrite),
#   visibility toggle, delete.
# Separates HTTP concerns from database/business logic.
#
# Rules enforced here:
# - nothing is written unless the generation call succeeded
# - only the owner may edit, toggle, download or delete
# - the visibility toggle writes nothing but is_public / updated_at
# =============================================================================

import logging
from typing import Any, Protocol
from uuid import UUID

from agents.base import GenerationError
from app.exceptions import (
    DatabaseError,
    GenerationFailedError,
    WebsiteAccessDeniedError,
    WebsiteNotFoundError,
    WebsiteSaveError,
)
from core.models.website import WebsiteInput
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_id, utc_now_iso

logger = logging.getLogger(__name__)


class SiteGenerator(Protocol):
    """Anything that can turn a website form into an HTML document."""

    def generate(self, site: WebsiteInput) -> str: ...


class WebsiteService:
    """
    Service for website record operations.

    Provides a clean interface between API routes and database.
    """

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    @staticmethod
    def _generate_html(site: WebsiteInput, generator: SiteGenerator) -> str:
        """
        Run the generation call, mapping every failure to GenerationFailedError.

        Upstream detail is logged, not returned to the client.
        """
        try:
            html_content = generator.generate(site)
        except GenerationError as e:
            logger.error(f"Generation failed for '{site.store_name}': {e}")
            raise GenerationFailedError()
        except Exception as e:
            logger.exception(f"Unexpected generation failure for '{site.store_name}': {e}")
            raise GenerationFailedError()

        if not html_content or not html_content.strip():
            logger.error(f"Generation returned no content for '{site.store_name}'")
            raise GenerationFailedError()

        return html_content

    # -------------------------------------------------------------------------
    # Create / Read
    # -------------------------------------------------------------------------

    @staticmethod
    def create_website(
        owner_id: UUID | str,
        site: WebsiteInput,
        generator: SiteGenerator,
    ) -> dict[str, Any]:
        """
        Generate and persist a new website.

        Args:
            owner_id: The authenticated user creating the site
            site: Validated form input
            generator: Site generator used for the generation call

        Returns:
            Created record with id, html_content, created_at

        Raises:
            GenerationFailedError: If generation fails (nothing is stored)
            WebsiteSaveError: If the insert fails
        """
        html_content = WebsiteService._generate_html(site, generator)

        now = utc_now_iso()
        data = {
            **site.to_record_fields(),
            "html_content": html_content,
            "owner_id": normalize_id(owner_id),
            "is_public": False,
            "created_at": now,
            "updated_at": now,
        }

        try:
            website = SupabaseClient.insert_website(data)
        except SupabaseClientError as e:
            logger.error(f"Failed to save website for user {owner_id}: {e}")
            raise WebsiteSaveError()

        logger.info(f"Created website: {website['id']} for user: {owner_id}")
        return website

    @staticmethod
    def get_website(
        website_id: str,
        user_id: UUID | str | None = None,
    ) -> dict[str, Any]:
        """
        Get a website by ID.

        Args:
            website_id: The record identifier
            user_id: If provided, verify the website belongs to this user.
                The viewer omits it: any website is viewable by link.

        Returns:
            Website dict

        Raises:
            WebsiteNotFoundError: If the website doesn't exist
            WebsiteAccessDeniedError: If user_id is given and is not the owner
        """
        try:
            website = SupabaseClient.fetch_website(website_id)
        except SupabaseClientError as e:
            logger.error(f"Failed to fetch website {website_id}: {e}")
            raise DatabaseError()

        if not website:
            raise WebsiteNotFoundError(website_id)

        if user_id is not None and str(website.get("owner_id")) != normalize_id(user_id):
            logger.warning(f"User {user_id} denied access to website {website_id}")
            raise WebsiteAccessDeniedError(website_id)

        return website

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    @staticmethod
    def list_websites(
        owner_id: UUID | str,
        page: int = 1,
        page_size: int = 12,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List the owner's websites (dashboard), newest first.

        Returns:
            Tuple of (website summaries, total count)
        """
        try:
            return SupabaseClient.list_websites(
                owner_id=owner_id,
                page=page,
                page_size=page_size,
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to list websites for user {owner_id}: {e}")
            raise DatabaseError()

    @staticmethod
    def list_public_websites(
        page: int = 1,
        page_size: int = 12,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List public websites (homepage), newest first.

        Returns:
            Tuple of (website summaries, total count)
        """
        try:
            return SupabaseClient.list_websites(
                is_public=True,
                page=page,
                page_size=page_size,
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to list public websites: {e}")
            raise DatabaseError()

    # -------------------------------------------------------------------------
    # Update / Delete
    # -------------------------------------------------------------------------

    @staticmethod
    def _write(website_id: str, data: dict[str, Any]) -> dict[str, Any]:
        try:
            updated = SupabaseClient.update_website(website_id, data)
        except SupabaseClientError as e:
            logger.error(f"Failed to update website {website_id}: {e}")
            raise WebsiteSaveError()

        if not updated:
            # Deleted between the ownership check and the write
            raise WebsiteNotFoundError(website_id)
        return updated

    @staticmethod
    def update_website(
        website_id: str,
        user_id: UUID | str,
        site: WebsiteInput,
        generator: SiteGenerator,
    ) -> dict[str, Any]:
        """
        Apply an edited form and regenerate the HTML.

        The record is only written after generation succeeds, so a failed
        call leaves the stored website untouched. Visibility is preserved.

        Raises:
            WebsiteNotFoundError, WebsiteAccessDeniedError,
            GenerationFailedError, WebsiteSaveError
        """
        WebsiteService.get_website(website_id, user_id=user_id)

        html_content = WebsiteService._generate_html(site, generator)

        updated = WebsiteService._write(website_id, {
            **site.to_record_fields(),
            "html_content": html_content,
            "updated_at": utc_now_iso(),
        })

        logger.info(f"Regenerated website: {website_id}")
        return updated

    @staticmethod
    def set_visibility(
        website_id: str,
        user_id: UUID | str,
        is_public: bool,
    ) -> dict[str, Any]:
        """
        Make a website public or private without regenerating it.

        Raises:
            WebsiteNotFoundError, WebsiteAccessDeniedError, WebsiteSaveError
        """
        WebsiteService.get_website(website_id, user_id=user_id)

        updated = WebsiteService._write(website_id, {
            "is_public": is_public,
            "updated_at": utc_now_iso(),
        })

        logger.info(f"Website {website_id} is now {'public' if is_public else 'private'}")
        return updated

    @staticmethod
    def delete_website(
        website_id: str,
        user_id: UUID | str,
    ) -> None:
        """
        Delete a website. It disappears from the dashboard and public listings.

        Raises:
            WebsiteNotFoundError, WebsiteAccessDeniedError, WebsiteSaveError
        """
        WebsiteService.get_website(website_id, user_id=user_id)

        try:
            deleted = SupabaseClient.delete_website(website_id)
        except SupabaseClientError as e:
            logger.error(f"Failed to delete website {website_id}: {e}")
            raise WebsiteSaveError()

        if not deleted:
            raise WebsiteNotFoundError(website_id)

        logger.info(f"Deleted website: {website_id}")
