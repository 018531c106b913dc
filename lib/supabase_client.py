# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for the website records table:
# - fetch by id (viewer / editor)
# - list by owner (dashboard) or by visibility (public listing)
# - insert / update / delete
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   website = SupabaseClient.fetch_website(website_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import ApplicationError, normalize_id

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"

# PostgREST code returned when a range starts past the last row
RANGE_NOT_SATISFIABLE_CODE = "PGRST103"

# Columns returned for listing cards (html_content can be large)
SUMMARY_COLUMNS = "id, owner_id, store_name, tagline, header_image, is_public, created_at, updated_at"


class SupabaseClientError(ApplicationError):
    """Error during Supabase operations."""

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Owner dashboard, newest first
        rows, total = SupabaseClient.list_websites(owner_id=user.id, page=1, page_size=12)

        # Single record for the viewer
        website = SupabaseClient.fetch_website("8c1f...")
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS);
        ownership is enforced by the service layer.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _table(cls):
        return cls.get_client().table(settings.WEBSITES_TABLE)

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_website(cls, website_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a website record by ID.

        Args:
            website_id: The record identifier

        Returns:
            Website dict with all fields, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        website_id_str = normalize_id(website_id)

        try:
            response = (
                cls._table()
                .select("*")
                .eq("id", website_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            # Malformed ids are rejected by Postgres before lookup
            if "22P02" in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch website: {e}",
                code="FETCH_WEBSITE_FAILED",
                suggestion="Check that the websites table is accessible",
                details={"website_id": website_id_str}
            )

    @classmethod
    def _filtered(
        cls,
        columns: str,
        owner_id: str | UUID | None,
        is_public: bool | None,
    ):
        """Select with the listing filters applied and an exact count."""
        query = cls._table().select(columns, count="exact")

        if owner_id is not None:
            query = query.eq("owner_id", normalize_id(owner_id))
        if is_public is not None:
            query = query.eq("is_public", is_public)

        return query

    @classmethod
    def list_websites(
        cls,
        owner_id: str | UUID | None = None,
        is_public: bool | None = None,
        page: int = 1,
        page_size: int = 12,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List website summaries, newest first.

        A page past the end returns no rows with the real total, so the
        client can step back to the last page.

        Args:
            owner_id: Only records owned by this user (dashboard)
            is_public: Only records with this visibility (public listing)
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            Tuple of (summary dicts, total matching count)

        Raises:
            SupabaseClientError: If query fails
        """
        offset = (page - 1) * page_size
        details = {"owner_id": str(owner_id) if owner_id else None, "is_public": is_public}

        try:
            response = (
                cls._filtered(SUMMARY_COLUMNS, owner_id, is_public)
                .order("created_at", desc=True)
                .range(offset, offset + page_size - 1)
                .execute()
            )
            rows = response.data or []
            total = response.count or 0

            logger.debug(f"Listed {len(rows)} websites (owner={owner_id}, public={is_public})")
            return rows, total

        except Exception as e:
            if RANGE_NOT_SATISFIABLE_CODE not in str(e):
                raise SupabaseClientError(
                    message=f"Failed to list websites: {e}",
                    code="LIST_WEBSITES_FAILED",
                    details=details
                )

        logger.debug(f"Page {page} is past the end (owner={owner_id}, public={is_public})")

        try:
            response = cls._filtered("id", owner_id, is_public).limit(1).execute()
            return [], response.count or 0

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to count websites: {e}",
                code="LIST_WEBSITES_FAILED",
                details=details
            )

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_website(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new website record.

        Args:
            data: Column values (id is assigned by the database)

        Returns:
            Inserted record with generated id

        Raises:
            SupabaseClientError: If insert fails
        """
        try:
            response = cls._table().insert(data).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert website: {e}",
                code="INSERT_WEBSITE_FAILED",
                details={"owner_id": data.get("owner_id")}
            )

    @classmethod
    def update_website(
        cls,
        website_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update columns of a website record.

        Returns:
            Updated record, or None if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        website_id_str = normalize_id(website_id)

        try:
            response = (
                cls._table()
                .update(data)
                .eq("id", website_id_str)
                .execute()
            )

            return response.data[0] if response.data else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update website: {e}",
                code="UPDATE_WEBSITE_FAILED",
                details={"website_id": website_id_str, "fields": sorted(data)}
            )

    @classmethod
    def delete_website(cls, website_id: str | UUID) -> bool:
        """
        Delete a website record.

        Returns:
            True if a row was deleted

        Raises:
            SupabaseClientError: If delete fails
        """
        website_id_str = normalize_id(website_id)

        try:
            response = (
                cls._table()
                .delete()
                .eq("id", website_id_str)
                .execute()
            )

            return bool(response.data)

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete website: {e}",
                code="DELETE_WEBSITE_FAILED",
                details={"website_id": website_id_str}
            )
