# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Storefront API:
# - test_models.py: Pydantic validation of the website form
# - test_html_utils.py: Generated-document helpers
# - test_site_generator.py / test_copywriter.py: Agents with mocked OpenAI
# - test_website_service.py: Record lifecycle and ownership rules
# - test_storage.py: Image upload validation and storage calls
# - test_auth.py: Supabase JWT verification
# - test_api.py: Endpoint integration tests via TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
