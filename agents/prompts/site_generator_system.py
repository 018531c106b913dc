# =============================================================================
# agents/prompts/site_generator_system.py - Site Generator Prompts
# =============================================================================
# System prompt and store-details builder for the site generator agent.
#
# Images never go into the prompt. Each image slot is represented by a
# placeholder token that the model must copy verbatim into an <img src>;
# the agent swaps the tokens for the real URLs / data URIs afterwards.
#
# Usage:
#   system = SITE_GENERATOR_SYSTEM_PROMPT
#   user = build_site_prompt(store_name="...", about="...", products=[...], ...)
# =============================================================================

from __future__ import annotations

HEADER_IMAGE_TOKEN = "{{HEADER_IMAGE}}"
PRODUCT_IMAGE_TOKEN = "{{{{PRODUCT_IMAGE_{index}}}}}"


def product_image_token(index: int) -> str:
    """Placeholder for the image of the product at 1-based position `index`."""
    return PRODUCT_IMAGE_TOKEN.format(index=index)


SITE_GENERATOR_SYSTEM_PROMPT = """
<role>
You are an expert web designer and front-end engineer who builds storefront
websites for small businesses.
</role>

<task>
Based on the store details provided by the user, generate one clean,
well-structured, modern and responsive web page for the store.

The page must include, in a sensible order:
- a header/hero with the store name and tagline (and the header image if one is provided)
- an About section
- a Products section with one card per product showing name and price (and image if provided)
- a Contact section with the contact information, store hours and social links when provided
- a simple footer
</task>

<constraints>
- The page must be self-contained: all styling inline or in a <style> block, no external CSS frameworks.
- Web fonts from Google Fonts are allowed. Do not include any external JavaScript.
- Use ONLY the text provided. Do not invent products, prices, addresses or links.
- Images: when a placeholder token such as {{HEADER_IMAGE}} or {{PRODUCT_IMAGE_1}} appears
  in the store details, use that exact token as the value of the img src attribute.
  Never alter a token and never invent image URLs. If a product has no token, do not show an image for it.
- Make social links clickable when they look like URLs or domains.
</constraints>

<output_format>
You MUST respond with a valid JSON object matching this schema:

{
    "html_content": "<!DOCTYPE html><html lang=\\"en\\">...</html>",
    "css_styling": "optional CSS; leave empty if all styles are already in html_content"
}
</output_format>
"""


def build_site_prompt(
    store_name: str,
    about: str,
    products: list[dict],
    contact_info: str,
    tagline: str | None = None,
    social_links: str | None = None,
    store_hours: str | None = None,
    header_image_token: str | None = None,
) -> str:
    """
    Build the user message describing the store.

    Args:
        products: Dicts with "name", "price" and optional "image_token"
        header_image_token: Token to use for the header image, if any

    Returns:
        Store details block ready to send as the user message

    Example:
        prompt = build_site_prompt(
            store_name="Cozy Corner",
            about="A neighbourhood bookshop.",
            products=[{"name": "Gift card", "price": "$25", "image_token": "{{PRODUCT_IMAGE_1}}"}],
            contact_info="123 Main St",
        )
    """
    product_lines = []
    for i, product in enumerate(products, start=1):
        line = f"{i}. {product['name']} - {product['price']}"
        if product.get("image_token"):
            line += f" (image: {product['image_token']})"
        product_lines.append(line)

    lines = [
        f"Store Name: {store_name}",
        f"Tagline: {tagline or '(none)'}",
        f"About: {about}",
        "Product List:",
        *product_lines,
        f"Contact Info: {contact_info}",
        f"Social Links: {social_links or '(none)'}",
        f"Store Hours: {store_hours or '(not provided)'}",
    ]
    if header_image_token:
        lines.append(f"Header Image: {header_image_token}")

    details = "\n".join(lines)

    return f"""<store_details>
{details}
</store_details>

Return the HTML content and CSS styling as JSON."""
