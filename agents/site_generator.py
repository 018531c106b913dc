# =============================================================================
# agents/site_generator.py - Storefront Site Generator Agent
# =============================================================================
# Turns a validated website form into one self-contained HTML document.
#
# Steps:
# 1. Assign a placeholder token to every provided image
# 2. Build the store-details prompt (no image bytes go to the model)
# 3. Call OpenAI in JSON mode
# 4. Parse {"html_content", "css_styling"} and assemble a full document
# 5. Substitute the real image references for the tokens
#
# Usage:
#   from agents.site_generator import SiteGeneratorAgent
#   agent = SiteGeneratorAgent()
#   html = agent.generate(website_input)
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI

from app.config import settings
from agents.base import GenerationError, JsonAgent
from agents.models.generated_site import GeneratedSite
from agents.prompts.site_generator_system import (
    HEADER_IMAGE_TOKEN,
    SITE_GENERATOR_SYSTEM_PROMPT,
    build_site_prompt,
    product_image_token,
)
from core.models.website import WebsiteInput
from lib.html_utils import (
    ensure_document,
    inject_styles,
    strip_code_fences,
    substitute_placeholders,
)

logger = logging.getLogger(__name__)


def build_image_tokens(site: WebsiteInput) -> dict[str, str]:
    """
    Map placeholder tokens to image references.

    Only images that were actually provided get a token.

    Example:
        {"{{HEADER_IMAGE}}": "https://...", "{{PRODUCT_IMAGE_2}}": "data:image/png;base64,..."}
    """
    tokens: dict[str, str] = {}
    if site.header_image:
        tokens[HEADER_IMAGE_TOKEN] = site.header_image
    for i, product in enumerate(site.products, start=1):
        if product.image:
            tokens[product_image_token(i)] = product.image
    return tokens


class SiteGeneratorAgent(JsonAgent):
    """
    Generates the storefront HTML document for a website form.

    Example:
        agent = SiteGeneratorAgent()
        html = agent.generate(WebsiteInput(...))
        assert html.startswith("<!DOCTYPE html>")
    """

    def __init__(
        self,
        model: str | None = None,
        temperature: float | None = None,
        client: OpenAI | None = None,
    ):
        super().__init__(
            model=model,
            temperature=temperature if temperature is not None else settings.GENERATOR_TEMPERATURE,
            client=client,
        )

    def generate(self, site: WebsiteInput) -> str:
        """
        Generate the HTML document for a store.

        Args:
            site: Validated form input

        Returns:
            Full HTML document string with real image references

        Raises:
            GenerationError: If the call fails or returns no usable content
        """
        logger.info(f"Generating site for '{site.store_name}' ({len(site.products)} products)")

        tokens = build_image_tokens(site)
        user_prompt = self._build_prompt(site)

        response_text = self._complete_json(SITE_GENERATOR_SYSTEM_PROMPT, user_prompt)
        generated = self._parse_response(response_text, GeneratedSite)

        document = self._assemble(generated, title=site.store_name)
        document = substitute_placeholders(document, tokens)

        logger.info(f"Generated {len(document)} characters of HTML for '{site.store_name}'")
        return document

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _build_prompt(self, site: WebsiteInput) -> str:
        products = []
        for i, product in enumerate(site.products, start=1):
            products.append({
                "name": product.name,
                "price": product.price,
                "image_token": product_image_token(i) if product.image else None,
            })

        return build_site_prompt(
            store_name=site.store_name,
            tagline=site.tagline,
            about=site.about,
            products=products,
            contact_info=site.contact_info,
            social_links=site.social_links,
            store_hours=site.store_hours,
            header_image_token=HEADER_IMAGE_TOKEN if site.header_image else None,
        )

    def _assemble(self, generated: GeneratedSite, title: str) -> str:
        """
        Turn model output into a single document.

        Raises:
            GenerationError: EMPTY_CONTENT if nothing is left after cleanup
        """
        html_content = strip_code_fences(generated.html_content)
        if not html_content:
            raise GenerationError(
                message="Model returned an empty document",
                code="EMPTY_CONTENT",
                suggestion="Try again",
            )

        document = ensure_document(html_content, title=title)
        css = strip_code_fences(generated.css_styling)
        return inject_styles(document, css)
