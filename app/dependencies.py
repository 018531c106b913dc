# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends() and can be
# swapped with app.dependency_overrides in tests.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from agents.copywriter import CopywriterAgent
from agents.site_generator import SiteGeneratorAgent


@lru_cache
def get_site_generator() -> SiteGeneratorAgent:
    """
    Get the site generator agent.

    Created on first use so the OpenAI client is only built when needed.
    """
    return SiteGeneratorAgent()


@lru_cache
def get_copywriter() -> CopywriterAgent:
    """Get the copywriter agent."""
    return CopywriterAgent()


# Type aliases for dependency injection
SiteGeneratorDep = Annotated[SiteGeneratorAgent, Depends(get_site_generator)]
CopywriterDep = Annotated[CopywriterAgent, Depends(get_copywriter)]
