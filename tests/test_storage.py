# =============================================================================
# tests/test_storage.py - Storage Service and Supabase Client Tests
# =============================================================================
# Tests image upload validation and the calls made against a mocked
# Supabase client, plus the query building in SupabaseClient.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import settings
from app.exceptions import (
    ImageTooLargeError,
    InvalidImageTypeError,
    InvalidUploadPurposeError,
    StorageUploadError,
)
from core.services.storage_service import StorageService
from lib.supabase_client import SupabaseClient, SupabaseClientError
from tests.conftest import OWNER_ID

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def supabase():
    """Mock Supabase client returned by SupabaseClient.get_client."""
    client = MagicMock()
    with patch.object(SupabaseClient, "get_client", return_value=client):
        yield client


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidateImage:
    """Tests for StorageService.validate_image."""

    def test_png_accepted(self):
        assert StorageService.validate_image("header", PNG_BYTES, "image/png") == "image/png"

    def test_content_type_parameters_ignored(self):
        assert StorageService.validate_image("product", PNG_BYTES, "IMAGE/JPEG; charset=binary") == "image/jpeg"

    def test_unknown_purpose(self):
        with pytest.raises(InvalidUploadPurposeError):
            StorageService.validate_image("avatar", PNG_BYTES, "image/png")

    def test_disallowed_type(self):
        with pytest.raises(InvalidImageTypeError) as exc_info:
            StorageService.validate_image("header", b"GIF89a", "image/gif")

        assert exc_info.value.status_code == 400

    def test_missing_type(self):
        with pytest.raises(InvalidImageTypeError):
            StorageService.validate_image("header", PNG_BYTES, None)

    def test_too_large(self):
        content = b"\x00" * (settings.max_image_size_bytes + 1)

        with pytest.raises(ImageTooLargeError) as exc_info:
            StorageService.validate_image("header", content, "image/png")

        assert exc_info.value.status_code == 413


# =============================================================================
# Upload Tests
# =============================================================================

class TestUploadImage:
    """Tests for StorageService.upload_image."""

    def test_build_path(self):
        path = StorageService.build_path(OWNER_ID, "product", "image/jpeg")

        assert path.startswith(f"users/{OWNER_ID}/product/")
        assert path.endswith(".jpg")

    def test_upload(self, supabase):
        bucket = supabase.storage.from_.return_value
        bucket.get_public_url.return_value = "https://test-project.supabase.co/storage/v1/object/public/site-images/x.png"

        path, url = StorageService.upload_image(OWNER_ID, "header", PNG_BYTES, "image/png")

        supabase.storage.from_.assert_called_with(settings.STORAGE_BUCKET)
        upload_kwargs = bucket.upload.call_args.kwargs
        assert upload_kwargs["path"] == path
        assert upload_kwargs["file"] == PNG_BYTES
        assert upload_kwargs["file_options"]["content-type"] == "image/png"
        assert url.endswith("x.png")

    def test_upload_failure(self, supabase):
        supabase.storage.from_.return_value.upload.side_effect = RuntimeError("bucket missing")

        with pytest.raises(StorageUploadError):
            StorageService.upload_image(OWNER_ID, "header", PNG_BYTES, "image/png")

    def test_validation_happens_before_upload(self, supabase):
        with pytest.raises(InvalidImageTypeError):
            StorageService.upload_image(OWNER_ID, "header", b"%PDF", "application/pdf")

        supabase.storage.from_.return_value.upload.assert_not_called()

    def test_delete_file(self, supabase):
        assert StorageService.delete_file("users/x/header/a.png") is True
        supabase.storage.from_.return_value.remove.assert_called_once_with(["users/x/header/a.png"])

    def test_delete_file_failure(self, supabase):
        supabase.storage.from_.return_value.remove.side_effect = RuntimeError("gone")
        assert StorageService.delete_file("users/x/header/a.png") is False


# =============================================================================
# SupabaseClient Query Tests
# =============================================================================

class TestSupabaseClient:
    """Tests for the website table wrapper against a mocked client."""

    def test_fetch_website(self, supabase):
        table = supabase.table.return_value
        table.select.return_value.eq.return_value.single.return_value.execute.return_value.data = {"id": "abc"}

        assert SupabaseClient.fetch_website("abc") == {"id": "abc"}
        supabase.table.assert_called_with(settings.WEBSITES_TABLE)
        table.select.return_value.eq.assert_called_with("id", "abc")

    def test_fetch_missing_returns_none(self, supabase):
        table = supabase.table.return_value
        table.select.return_value.eq.return_value.single.return_value.execute.side_effect = Exception(
            "{'code': 'PGRST116', 'message': 'JSON object requested, multiple (or no) rows returned'}"
        )

        assert SupabaseClient.fetch_website("abc") is None

    def test_fetch_failure_raises(self, supabase):
        table = supabase.table.return_value
        table.select.return_value.eq.return_value.single.return_value.execute.side_effect = Exception("timeout")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_website("abc")

        assert exc_info.value.code == "FETCH_WEBSITE_FAILED"

    def test_list_websites_filters_and_range(self, supabase):
        query = supabase.table.return_value.select.return_value
        query.eq.return_value = query
        query.order.return_value = query
        query.range.return_value = query
        query.execute.return_value.data = [{"id": "a"}]
        query.execute.return_value.count = 7

        rows, total = SupabaseClient.list_websites(owner_id=OWNER_ID, page=3, page_size=2)

        assert rows == [{"id": "a"}]
        assert total == 7
        query.eq.assert_called_once_with("owner_id", str(OWNER_ID))
        query.order.assert_called_once_with("created_at", desc=True)
        query.range.assert_called_once_with(4, 5)

    def test_list_websites_page_past_end(self, supabase):
        query = supabase.table.return_value.select.return_value
        query.eq.return_value = query
        query.order.return_value = query
        query.range.return_value = query
        query.limit.return_value = query
        query.execute.side_effect = [
            Exception("{'code': 'PGRST103', 'message': 'Requested range not satisfiable'}"),
            MagicMock(data=[{"id": "a"}], count=5),
        ]

        rows, total = SupabaseClient.list_websites(is_public=True, page=9, page_size=12)

        assert rows == []
        assert total == 5
        supabase.table.return_value.select.assert_called_with("id", count="exact")
        query.eq.assert_called_with("is_public", True)

    def test_list_websites_failure_raises(self, supabase):
        query = supabase.table.return_value.select.return_value
        query.order.return_value = query
        query.range.return_value = query
        query.execute.side_effect = Exception("connection reset")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.list_websites(page=1, page_size=12)

        assert exc_info.value.code == "LIST_WEBSITES_FAILED"

    def test_insert_without_data_raises(self, supabase):
        supabase.table.return_value.insert.return_value.execute.return_value.data = []

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_website({"store_name": "Shop"})

        assert exc_info.value.code == "INSERT_NO_DATA"

    def test_update_no_match_returns_none(self, supabase):
        supabase.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []

        assert SupabaseClient.update_website("abc", {"is_public": True}) is None

    def test_delete(self, supabase):
        supabase.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = [{"id": "abc"}]

        assert SupabaseClient.delete_website("abc") is True
