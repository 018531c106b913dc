#!/usr/bin/env python3
# =============================================================================
# scripts/generate_site_live.py - Live Test for the Site Generator
# =============================================================================
# Generates a storefront with real OpenAI API calls and writes the HTML
# to disk so it can be opened in a browser.
#
# Usage:
#   poetry run python scripts/generate_site_live.py [output.html]
#
# Make sure OPENAI_API_KEY is set in your environment or .env file.
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

# Check for API key
if not os.getenv("OPENAI_API_KEY"):
    print("ERROR: OPENAI_API_KEY not found in environment")
    print("Please set it in your .env file or environment")
    sys.exit(1)

from agents.base import GenerationError
from agents.copywriter import CopywriterAgent
from agents.site_generator import SiteGeneratorAgent
from core.models.website import WebsiteInput
from lib.html_utils import download_filename


def build_sample_input(about: str) -> WebsiteInput:
    """Sample store used for the live run."""
    return WebsiteInput(
        store_name="The Cozy Corner Bookstore",
        tagline="Books, tea and a comfy chair",
        about=about,
        products=[
            {"name": "Mystery novel bundle", "price": "$29"},
            {"name": "House blend tea", "price": "$12 / 100g"},
            {"name": "Gift card", "price": "from $10", "image": "https://picsum.photos/seed/giftcard/400/300"},
        ],
        contact_info="123 Main St, Springfield | hello@cozycorner.example",
        social_links="instagram.com/cozycorner",
        store_hours="Tue-Sun 10am-6pm",
        header_image="https://picsum.photos/seed/bookstore/1200/400",
    )


def main():
    print("=" * 60)
    print("SITE GENERATOR LIVE TEST")
    print("=" * 60)

    copywriter = CopywriterAgent()
    generator = SiteGeneratorAgent()

    try:
        about = copywriter.generate_about_text("The Cozy Corner Bookstore", "Books, tea and a comfy chair")
        print(f"\nAbout text:\n  {about}\n")

        site = build_sample_input(about)
        html = generator.generate(site)
    except GenerationError as e:
        print(f"\nERROR: {e}")
        sys.exit(1)

    output = sys.argv[1] if len(sys.argv) > 1 else download_filename(site.store_name)
    with open(output, "w", encoding="utf-8") as f:
        f.write(html)

    print(f"Wrote {len(html)} characters to {output}")


if __name__ == "__main__":
    main()
