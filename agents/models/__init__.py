# =============================================================================
# agents/models/ - Agent Output Schemas
# =============================================================================
# This package contains Pydantic models for what each agent expects back
# from the model:
# - generated_site.py: GeneratedSite, AboutText, ImprovedContent
# =============================================================================

from agents.models.generated_site import (
    AboutText,
    GeneratedSite,
    ImprovedContent,
)

__all__ = [
    "AboutText",
    "GeneratedSite",
    "ImprovedContent",
]
