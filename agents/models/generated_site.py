# =============================================================================
# agents/models/generated_site.py - Generation Output Schemas
# =============================================================================
# Pydantic models for what the model must return in JSON mode:
# - GeneratedSite: site generator output (HTML plus optional separate CSS)
# - AboutText: copywriter "About Us" output
# - ImprovedContent: copywriter content-improvement output
#
# Example site generator response:
#   {
#       "html_content": "<!DOCTYPE html><html>...</html>",
#       "css_styling": "body { font-family: ... }"
#   }
# =============================================================================

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratedSite(BaseModel):
    """
    Raw site generator output.

    html_content may be a full document or a fragment; css_styling is
    optional and is inlined into the final document by the agent.
    """

    html_content: str = Field(
        ...,
        description="The generated HTML content for the website"
    )

    css_styling: str | None = Field(
        default=None,
        description="Optional CSS to inline into the document head"
    )


class AboutText(BaseModel):
    """Generated 'About Us' copy."""

    about_text: str = Field(..., min_length=1)


class ImprovedContent(BaseModel):
    """Improved website copy with suggestions."""

    improved_content: str = Field(..., min_length=1)
