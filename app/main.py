# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Storefront API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    StorefrontException,
    storefront_exception_handler,
    validation_exception_handler,
)
from app.routers import health, websites, public, uploads, assist
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown. The Supabase client and the agents are
    created lazily on first use, so there is nothing to tear down.
    """
    logger.info(f"Starting Storefront API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Generation model: {settings.OPENAI_MODEL}")

    yield

    logger.info("Shutting down Storefront API")


# Create FastAPI application
app = FastAPI(
    title="Storefront API",
    description="""
## AI-Generated Storefront Websites

Small business owners fill in one form and get a complete, single-file
storefront website they can view, share, edit and download.

### How It Works

1. **Sign in** - Supabase Auth issues the bearer token
2. **Upload images** - Optional header and product photos
3. **Create a website** - Submit the form; the HTML is generated and saved
4. **Share it** - Make it public so it appears on the homepage
5. **Download** - Take the HTML file anywhere

### Quick Start

```bash
# 1. Create a website
curl -X POST http://localhost:8000/api/v1/websites \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"store_name": "Cozy Corner", "about": "Books, tea and a comfy chair.", \\
       "products": [{"name": "Mug", "price": 12}], \\
       "contact_info": "hello@cozycorner.test"}'

# 2. Make it public
curl -X PATCH http://localhost:8000/api/v1/websites/{id}/visibility \\
  -H "Authorization: Bearer $TOKEN" \\
  -d '{"is_public": true}'

# 3. View it
open http://localhost:8000/sites/{id}
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Authentication endpoints for verifying JWT tokens",
        },
        {
            "name": "Websites",
            "description": "Create, edit, list and delete your websites",
        },
        {
            "name": "Public",
            "description": "Public homepage listing",
        },
        {
            "name": "Viewer",
            "description": "Rendered website pages and HTML downloads",
        },
        {
            "name": "Uploads",
            "description": "Upload header and product images",
        },
        {
            "name": "Assist",
            "description": "Copywriting help for the website form",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(StorefrontException)
async def handle_storefront_exception(request: Request, exc: StorefrontException):
    """Handle custom Storefront exceptions."""
    return await storefront_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request body / query validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints (router carries the /auth prefix)
app.include_router(
    auth_routes.router,
    prefix="/api/v1",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Website management endpoints
app.include_router(
    websites.router,
    prefix="/api/v1/websites",
    tags=["Websites"]
)

# Public listing endpoint
app.include_router(
    public.router,
    prefix="/api/v1",
    tags=["Public"]
)

# Image upload endpoints
app.include_router(
    uploads.router,
    prefix="/api/v1",
    tags=["Uploads"]
)

# Copywriting assist endpoints
app.include_router(
    assist.router,
    prefix="/api/v1",
    tags=["Assist"]
)

# Viewer pages
app.include_router(
    public.viewer_router,
    prefix="/sites",
    tags=["Viewer"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Storefront API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
