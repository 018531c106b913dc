# =============================================================================
# tests/test_auth.py - Authentication Tests
# =============================================================================
# Verifies Supabase access tokens (HS256) end to end: decoding, error
# messages, and the /auth routes and link-based viewer access
# with the real dependencies in place.
# =============================================================================

import time

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from jose import jwt

from app.auth import decode_access_token
from app.config import settings
from app.main import app
from tests.conftest import OWNER_ID


def make_token(
    sub: str | None = str(OWNER_ID),
    email: str | None = "owner@example.com",
    expires_in: int = 3600,
    audience: str = "authenticated",
    secret: str | None = None,
) -> str:
    """Build a Supabase-style HS256 access token."""
    now = int(time.time())
    claims = {"aud": audience, "iat": now, "exp": now + expires_in, "role": "authenticated"}
    if sub is not None:
        claims["sub"] = sub
    if email is not None:
        claims["email"] = email
    return jwt.encode(claims, secret or settings.SUPABASE_JWT_SECRET, algorithm="HS256")


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def real_auth_client(website_store, site_generator):
    """TestClient with the real auth dependencies and a stub generator."""
    from app.dependencies import get_site_generator

    app.dependency_overrides.clear()
    app.dependency_overrides[get_site_generator] = lambda: site_generator
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Token Decoding Tests
# =============================================================================

class TestDecodeAccessToken:
    """Tests for decode_access_token."""

    def test_valid_token(self):
        user = decode_access_token(make_token())

        assert user.id == OWNER_ID
        assert user.email == "owner@example.com"

    def test_email_optional(self):
        user = decode_access_token(make_token(email=None))
        assert user.email is None

    def test_expired_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(expires_in=-60))

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(secret="not-the-secret"))

        assert exc_info.value.detail == "Invalid token"

    def test_wrong_audience(self):
        with pytest.raises(HTTPException):
            decode_access_token(make_token(audience="anon"))

    def test_missing_sub(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(sub=None))

        assert "missing user ID" in exc_info.value.detail

    def test_malformed_sub(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(make_token(sub="not-a-uuid"))

        assert "malformed user ID" in exc_info.value.detail

    def test_garbage_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token("not.a.jwt")

        assert exc_info.value.status_code == 401


# =============================================================================
# Route Tests
# =============================================================================

class TestAuthRoutes:
    """Tests for /api/v1/auth/*."""

    def test_verify(self, real_auth_client):
        response = real_auth_client.get("/api/v1/auth/verify", headers=bearer(make_token()))

        assert response.status_code == 200
        assert response.json() == {"valid": True, "user_id": str(OWNER_ID), "email": "owner@example.com"}

    def test_me_counts_websites(self, real_auth_client, sample_website_dict):
        headers = bearer(make_token())
        real_auth_client.post("/api/v1/websites", json=sample_website_dict, headers=headers)

        response = real_auth_client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["website_count"] == 1

    def test_missing_token(self, real_auth_client):
        response = real_auth_client.get("/api/v1/auth/me")
        assert response.status_code in (401, 403)

    def test_expired_token_rejected(self, real_auth_client):
        response = real_auth_client.get("/api/v1/auth/me", headers=bearer(make_token(expires_in=-60)))

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_protected_route_requires_auth(self, real_auth_client, sample_website_dict):
        response = real_auth_client.post("/api/v1/websites", json=sample_website_dict)
        assert response.status_code in (401, 403)


class TestViewerByLink:
    """A site created with a real token can be opened without one."""

    @pytest.fixture
    def private_site_id(self, real_auth_client, sample_website_dict):
        response = real_auth_client.post(
            "/api/v1/websites", json=sample_website_dict, headers=bearer(make_token())
        )
        assert response.status_code == 201
        assert response.json()["is_public"] is False
        return response.json()["id"]

    def test_view_without_token(self, real_auth_client, private_site_id):
        response = real_auth_client.get(f"/sites/{private_site_id}")

        assert response.status_code == 200
        assert "<iframe" in response.text

    def test_download_without_token(self, real_auth_client, private_site_id):
        response = real_auth_client.get(f"/sites/{private_site_id}/download")
        assert response.status_code == 200

    def test_invalid_token_ignored(self, real_auth_client, private_site_id):
        response = real_auth_client.get(f"/sites/{private_site_id}", headers=bearer("garbage"))
        assert response.status_code == 200

    def test_private_site_not_listed(self, real_auth_client, private_site_id):
        body = real_auth_client.get("/api/v1/public/websites").json()
        assert private_site_id not in [w["id"] for w in body["websites"]]
