# =============================================================================
# agents/ - AI Agent Definitions
# =============================================================================
# This package contains the agents that call the hosted model:
# - site_generator.py: store form -> self-contained HTML document
# - copywriter.py: About Us text and content improvement helpers
# - base.py: shared JSON-mode OpenAI call and GenerationError
#
# Models:
# - models/generated_site.py: expected JSON output of each agent
#
# Prompts:
# - prompts/site_generator_system.py, prompts/copywriter_system.py
# =============================================================================

from agents.base import GenerationError, JsonAgent
from agents.copywriter import CopywriterAgent
from agents.site_generator import SiteGeneratorAgent, build_image_tokens

__all__ = [
    "GenerationError",
    "JsonAgent",
    "CopywriterAgent",
    "SiteGeneratorAgent",
    "build_image_tokens",
]
