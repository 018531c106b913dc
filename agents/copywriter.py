# =============================================================================
# agents/copywriter.py - Copywriter Agent
# =============================================================================
# Helper flows offered while the owner fills in the form:
# - generate_about_text: 2-4 sentence "About Us" from name and tagline
# - improve_content: rewrite a piece of copy for clarity and engagement
#
# Usage:
#   from agents.copywriter import CopywriterAgent
#   text = CopywriterAgent().generate_about_text("Cozy Corner", "Books & tea")
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI

from app.config import settings
from agents.base import GenerationError, JsonAgent
from agents.models.generated_site import AboutText, ImprovedContent
from agents.prompts.copywriter_system import (
    ABOUT_TEXT_SYSTEM_PROMPT,
    IMPROVE_CONTENT_SYSTEM_PROMPT,
    build_about_prompt,
    build_improve_prompt,
)

logger = logging.getLogger(__name__)


class CopywriterAgent(JsonAgent):
    """Writes and improves storefront copy."""

    def __init__(
        self,
        model: str | None = None,
        temperature: float | None = None,
        client: OpenAI | None = None,
    ):
        super().__init__(
            model=model,
            temperature=temperature if temperature is not None else settings.COPYWRITER_TEMPERATURE,
            client=client,
        )

    def generate_about_text(self, store_name: str, tagline: str | None = None) -> str:
        """
        Generate an "About Us" section.

        Raises:
            GenerationError: If the call fails or returns no text
        """
        logger.info(f"Generating about text for '{store_name}'")
        response_text = self._complete_json(
            ABOUT_TEXT_SYSTEM_PROMPT,
            build_about_prompt(store_name, tagline),
        )
        about_text = self._parse_response(response_text, AboutText).about_text
        return self._require_text(about_text, "about text")

    def improve_content(self, content: str) -> str:
        """
        Suggest an improved version of a piece of website copy.

        Raises:
            GenerationError: If the call fails or returns no text
        """
        logger.info(f"Improving {len(content)} characters of content")
        response_text = self._complete_json(
            IMPROVE_CONTENT_SYSTEM_PROMPT,
            build_improve_prompt(content),
        )
        improved = self._parse_response(response_text, ImprovedContent).improved_content
        return self._require_text(improved, "improved content")

    @staticmethod
    def _require_text(text: str, label: str) -> str:
        """Strip model text; whitespace-only output counts as empty."""
        text = text.strip()
        if not text:
            logger.warning(f"Model returned blank {label}")
            raise GenerationError(
                message=f"Model returned blank {label}",
                code="EMPTY_CONTENT",
                suggestion="Try again",
            )
        return text
