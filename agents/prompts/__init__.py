# =============================================================================
# agents/prompts/ - System Prompts for AI Agents
# =============================================================================
# This package contains system prompts for each agent:
# - site_generator_system.py: storefront HTML generation
# - copywriter_system.py: About Us text and content improvement
#
# Organized with XML tags for clear structure.
# =============================================================================

from agents.prompts.site_generator_system import (
    HEADER_IMAGE_TOKEN,
    SITE_GENERATOR_SYSTEM_PROMPT,
    build_site_prompt,
    product_image_token,
)
from agents.prompts.copywriter_system import (
    ABOUT_TEXT_SYSTEM_PROMPT,
    IMPROVE_CONTENT_SYSTEM_PROMPT,
    build_about_prompt,
    build_improve_prompt,
)

__all__ = [
    "HEADER_IMAGE_TOKEN",
    "SITE_GENERATOR_SYSTEM_PROMPT",
    "build_site_prompt",
    "product_image_token",
    "ABOUT_TEXT_SYSTEM_PROMPT",
    "IMPROVE_CONTENT_SYSTEM_PROMPT",
    "build_about_prompt",
    "build_improve_prompt",
]
