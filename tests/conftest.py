# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - An in-memory websites table patched over SupabaseClient
# - A stub site generator so no test reaches OpenAI
# - A TestClient with the auth dependencies overridden
# =============================================================================

import json
import os
import uuid
from unittest.mock import MagicMock
from uuid import UUID

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-signing")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi import HTTPException, status

from app.auth.models import AuthUser
from core.models.website import WebsiteInput
from lib.supabase_client import SUMMARY_COLUMNS, SupabaseClient, SupabaseClientError


OWNER_ID = UUID("550e8400-e29b-41d4-a716-446655440000")
OTHER_USER_ID = UUID("7d9f2c1e-3b4a-4c5d-8e6f-0a1b2c3d4e5f")

PNG_DATA_URI = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


# =============================================================================
# Test Doubles
# =============================================================================

class InMemoryWebsites:
    """
    Stand-in for the websites table.

    Mirrors the SupabaseClient website methods closely enough for the
    service and API tests: ids are assigned on insert, listings are newest
    first and return only the summary columns.
    """

    def __init__(self):
        self.rows: dict[str, dict] = {}
        self._seq = 0
        self.error: SupabaseClientError | None = None

    def _check(self):
        if self.error:
            raise self.error

    def fetch(self, website_id):
        self._check()
        row = self.rows.get(str(website_id))
        return dict(row) if row else None

    def list_rows(self, owner_id=None, is_public=None, page=1, page_size=12):
        self._check()
        rows = list(self.rows.values())
        if owner_id is not None:
            rows = [r for r in rows if r["owner_id"] == str(owner_id)]
        if is_public is not None:
            rows = [r for r in rows if r["is_public"] == is_public]
        rows.sort(key=lambda r: r["_seq"], reverse=True)

        columns = [c.strip() for c in SUMMARY_COLUMNS.split(",")]
        offset = (page - 1) * page_size
        page_rows = [
            {c: r.get(c) for c in columns}
            for r in rows[offset:offset + page_size]
        ]
        return page_rows, len(rows)

    def insert(self, data):
        self._check()
        self._seq += 1
        row = dict(data)
        row["id"] = str(uuid.uuid4())
        row["_seq"] = self._seq
        self.rows[row["id"]] = row
        return self._public(row)

    def update(self, website_id, data):
        self._check()
        row = self.rows.get(str(website_id))
        if row is None:
            return None
        row.update(data)
        return self._public(row)

    def delete(self, website_id):
        self._check()
        return self.rows.pop(str(website_id), None) is not None

    @staticmethod
    def _public(row):
        return {k: v for k, v in row.items() if k != "_seq"}


class StubSiteGenerator:
    """Site generator that records calls and returns a fixed document."""

    def __init__(self):
        self.calls: list[WebsiteInput] = []
        self.error: Exception | None = None
        self.result: str | None = None

    def generate(self, site: WebsiteInput) -> str:
        self.calls.append(site)
        if self.error:
            raise self.error
        if self.result is not None:
            return self.result
        return (
            "<!DOCTYPE html><html><head>"
            f"<title>{site.store_name}</title></head>"
            f"<body><h1>{site.store_name}</h1><p>{site.about}</p></body></html>"
        )


class AuthState:
    """Which user the overridden auth dependencies report."""

    def __init__(self, user: AuthUser | None):
        self.user = user

    def login_as(self, user: AuthUser | None):
        self.user = user

    def current(self) -> AuthUser:
        if self.user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
            )
        return self.user


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def owner():
    """The user who owns the websites under test."""
    return AuthUser(id=OWNER_ID, email="owner@example.com")


@pytest.fixture
def other_user():
    """A signed-in user who does not own the websites under test."""
    return AuthUser(id=OTHER_USER_ID, email="someone@example.com")


@pytest.fixture
def sample_website_dict():
    """Sample create/edit form payload."""
    return {
        "store_name": "The Cozy Corner Bookstore",
        "tagline": "Books, tea and a comfy chair",
        "about": "A neighbourhood bookshop with a reading nook and a cat named Page.",
        "products": [
            {"name": "Gift card", "price": "$25"},
            {"name": "Reading lamp", "price": "$40", "image": "https://cdn.example.com/lamp.jpg"},
        ],
        "contact_info": "123 Main St | hello@cozycorner.example",
        "social_links": "instagram.com/cozycorner",
        "store_hours": "Tue-Sun 10am-6pm",
        "header_image": PNG_DATA_URI,
    }


@pytest.fixture
def sample_website_input(sample_website_dict):
    """Validated form input."""
    return WebsiteInput.model_validate(sample_website_dict)


@pytest.fixture
def website_store(monkeypatch):
    """In-memory websites table patched over SupabaseClient."""
    store = InMemoryWebsites()
    monkeypatch.setattr(SupabaseClient, "fetch_website", staticmethod(store.fetch))
    monkeypatch.setattr(SupabaseClient, "list_websites", staticmethod(store.list_rows))
    monkeypatch.setattr(SupabaseClient, "insert_website", staticmethod(store.insert))
    monkeypatch.setattr(SupabaseClient, "update_website", staticmethod(store.update))
    monkeypatch.setattr(SupabaseClient, "delete_website", staticmethod(store.delete))
    return store


@pytest.fixture
def site_generator():
    """Stub site generator."""
    return StubSiteGenerator()


@pytest.fixture
def copywriter():
    """Mock copywriter agent."""
    mock = MagicMock()
    mock.generate_about_text.return_value = "We are a cozy bookshop. Come in and stay a while."
    mock.improve_content.return_value = "Improved copy."
    return mock


@pytest.fixture
def auth(owner):
    """Auth state for API tests; starts signed in as the owner."""
    return AuthState(owner)


@pytest.fixture
def client(website_store, site_generator, copywriter, auth):
    """TestClient with storage, agents and auth replaced by test doubles."""
    from fastapi.testclient import TestClient

    from app.auth import get_current_user
    from app.dependencies import get_copywriter, get_site_generator
    from app.main import app

    app.dependency_overrides[get_current_user] = auth.current
    app.dependency_overrides[get_site_generator] = lambda: site_generator
    app.dependency_overrides[get_copywriter] = lambda: copywriter

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def mock_openai_response():
    """Build a mock chat completion carrying the given JSON payload."""
    def _create_mock(payload):
        content = payload if isinstance(payload, str) or payload is None else json.dumps(payload)
        mock_response = MagicMock()
        mock_response.choices = [MagicMock()]
        mock_response.choices[0].message.content = content
        return mock_response
    return _create_mock
