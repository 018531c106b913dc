# =============================================================================
# agents/prompts/copywriter_system.py - Copywriter Prompts
# =============================================================================
# Prompts for the two helper flows used while filling in the form:
# - "About Us" text from the store name and tagline
# - improving a piece of existing website copy
# =============================================================================

from __future__ import annotations

ABOUT_TEXT_SYSTEM_PROMPT = """
<role>
You are an expert copywriter specializing in creating compelling brand stories.
</role>

<task>
Generate an engaging "About Us" section for the store described by the user.
The description should be 2-4 sentences long, professional, and inviting.
</task>

<output_format>
Respond with a valid JSON object: {"about_text": "..."}
Return ONLY the generated text in the about_text field.
</output_format>
"""

IMPROVE_CONTENT_SYSTEM_PROMPT = """
<role>
You are an expert in website content optimization.
</role>

<task>
Review the website content provided by the user and improve its quality and engagement.
Focus on clarity, readability, and persuasiveness. Provide specific examples of how to
rephrase sentences or add details.
</task>

<output_format>
Respond with a valid JSON object: {"improved_content": "..."}
</output_format>
"""


def build_about_prompt(store_name: str, tagline: str | None = None) -> str:
    """User message for the About Us flow."""
    lines = [f"Store Name: {store_name}"]
    if tagline:
        lines.append(f"Tagline: {tagline}")
    return "\n".join(lines)


def build_improve_prompt(content: str) -> str:
    """User message for the content improvement flow."""
    return f"<website_content>\n{content}\n</website_content>"
