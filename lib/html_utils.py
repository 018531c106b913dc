# =============================================================================
# lib/html_utils.py - Generated HTML Helpers
# =============================================================================
# Small, pure helpers around the HTML document returned by the generator:
# - cleaning up model output (code fences, fragments, separate CSS)
# - swapping image placeholder tokens for real image references
# - building the viewer page and the download filename
#
# Document structure (<html>, <head>, <body>) is found with BeautifulSoup,
# so tags that only appear inside scripts or comments are never matched.
#
# Usage:
#   html = ensure_document(strip_code_fences(raw), title="Cozy Corner")
#   html = substitute_placeholders(html, {"{{HEADER_IMAGE}}": url})
# =============================================================================

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup, Doctype

_FENCE_RE = re.compile(r"^\s*```[a-zA-Z0-9_-]*\s*([\s\S]*?)\s*```\s*$")


def strip_code_fences(text: str | None) -> str:
    """
    Remove a surrounding markdown code fence, if present.

    Models sometimes wrap HTML in ```html ... ``` even in JSON mode.
    """
    if not text:
        return ""
    fenced = _FENCE_RE.match(text)
    if fenced:
        return fenced.group(1).strip()
    return text.strip()


def ensure_document(fragment: str, title: str) -> str:
    """
    Return a full HTML document.

    If the input already has an <html> element it is returned unchanged
    (a doctype is prepended when missing). Otherwise the fragment becomes
    the body of a minimal document titled with the store name.
    """
    content = fragment.strip()
    soup = BeautifulSoup(content, "html.parser")

    if soup.find("html") is not None:
        if not any(isinstance(node, Doctype) for node in soup.contents):
            content = "<!DOCTYPE html>\n" + content
        return content

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{html.escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{content}\n"
        "</body>\n"
        "</html>"
    )


def inject_styles(document: str, css: str | None) -> str:
    """
    Inline a stylesheet into the document.

    Appended to <head> when there is one. A document with <html> but no
    <head> gets a new <head>; otherwise the style goes first in <body>,
    or first in the document as a last resort.
    """
    if not css or not css.strip():
        return document

    soup = BeautifulSoup(document, "html.parser")
    style = soup.new_tag("style")
    style.string = f"\n{css.strip()}\n"

    if soup.head is not None:
        soup.head.append(style)
    elif soup.html is not None:
        head = soup.new_tag("head")
        head.append(style)
        soup.html.insert(0, head)
    elif soup.body is not None:
        soup.body.insert(0, style)
    else:
        soup.insert(0, style)

    return str(soup)


def substitute_placeholders(document: str, mapping: dict[str, str]) -> str:
    """
    Replace image placeholder tokens with attribute-safe image references.

    References are escaped so a quote in a URL cannot break out of the
    src attribute the model placed the token in.
    """
    for token, reference in mapping.items():
        document = document.replace(token, html.escape(reference, quote=True))
    return document


def download_filename(store_name: str | None) -> str:
    """
    Build the filename offered when downloading a generated site.

    Example:
        download_filename("The Cozy Corner")  # "the-cozy-corner.html"
    """
    name = (store_name or "").strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^a-z0-9._-]", "", name).strip(".-")
    return f"{name or 'website'}.html"


VIEWER_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
  html, body {{ margin: 0; height: 100%; font-family: system-ui, sans-serif; }}
  .bar {{ display: flex; gap: 1rem; align-items: center; padding: 0.5rem 1rem; border-bottom: 1px solid #e5e5e5; }}
  .bar a {{ color: inherit; }}
  iframe {{ display: block; width: 100%; height: calc(100% - 2.6rem); border: 0; }}
</style>
</head>
<body>
<div class="bar">
  <strong>{title}</strong>
  <a href="{download_url}">Download</a>
</div>
<iframe title="{title}" sandbox="allow-scripts allow-same-origin" srcdoc="{srcdoc}"></iframe>
</body>
</html>
"""


def render_viewer(title: str, document: str, download_url: str) -> str:
    """
    Render the viewer page.

    The stored document is shown verbatim inside a sandboxed iframe via
    srcdoc; escaping here only protects the attribute, the browser
    un-escapes it before rendering.
    """
    return VIEWER_TEMPLATE.format(
        title=html.escape(title),
        download_url=html.escape(download_url, quote=True),
        srcdoc=html.escape(document, quote=True),
    )
