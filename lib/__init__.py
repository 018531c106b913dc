# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for website record operations
# - html_utils.py: Helpers for assembling and serving generated HTML documents
# - utils.py: Shared utilities (error base class, id normalization, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.html_utils import (
    download_filename,
    ensure_document,
    inject_styles,
    render_viewer,
    strip_code_fences,
    substitute_placeholders,
)
from lib.utils import ApplicationError, normalize_id, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # HTML
    "download_filename",
    "ensure_document",
    "inject_styles",
    "render_viewer",
    "strip_code_fences",
    "substitute_placeholders",
    # Utils
    "ApplicationError",
    "normalize_id",
    "utc_now_iso",
]
