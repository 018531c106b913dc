# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# - GET /health:       process is up, with environment and version
# - GET /health/ready: the websites table and the image bucket are reachable
# - GET /health/live:  cheap liveness ping, touches nothing external
#
# Readiness always answers 200; a failing dependency marks it "degraded".
# =============================================================================

import logging
from typing import Callable

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"

HEALTHY = "healthy"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Process status."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Result per dependency: "healthy" or "unhealthy: <reason>"."""
    database: str
    storage: str


class ReadinessResponse(BaseModel):
    """Dependency status."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


# =============================================================================
# Checks
# =============================================================================

def _check_websites_table() -> None:
    client = SupabaseClient.get_client()
    client.table(settings.WEBSITES_TABLE).select("id").limit(1).execute()


def _check_image_bucket() -> None:
    client = SupabaseClient.get_client()
    client.storage.get_bucket(settings.STORAGE_BUCKET)


def _run_check(name: str, check: Callable[[], None]) -> str:
    """Run one dependency check and describe the outcome."""
    try:
        check()
        return HEALTHY
    except Exception as e:
        logger.warning(f"Readiness check '{name}' failed: {e}")
        return f"unhealthy: {str(e)[:50]}"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report that the API process is serving requests."""
    return HealthResponse(
        status=HEALTHY,
        timestamp=utc_now_iso(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Check the Supabase dependencies the storefront needs.

    database: the websites table answers a one-row select.
    storage:  the image upload bucket exists.
    """
    checks = ChecksResponse(
        database=_run_check("database", _check_websites_table),
        storage=_run_check("storage", _check_image_bucket),
    )
    ready = checks.database == HEALTHY and checks.storage == HEALTHY

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        checks=checks,
        timestamp=utc_now_iso(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    return LivenessResponse(status="alive", timestamp=utc_now_iso())
