# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - websites.py: Owner-facing website create/edit/list/delete endpoints
# - public.py: Public listing plus the viewer and download pages
# - uploads.py: Header and product image uploads
# - assist.py: Copywriting helpers for the form
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import websites
from . import public
from . import uploads
from . import assist

__all__ = [
    "health",
    "websites",
    "public",
    "uploads",
    "assist",
]
