"""Standalone HTML page around a compiled fragment.

compile() returns a bare fragment. wrap_document() places it in a minimal
preview page with a title and a small stylesheet.
"""

from __future__ import annotations

from plumilla.renderers.html import html_escape

DEFAULT_TITLE = "Markdown Preview"

DEFAULT_STYLESHEET = (
    "body { font-family: Arial, sans-serif; margin: 40px; }"
    "blockquote { color: gray; border-left: 4px solid #ccc; padding-left: 10px; }"
    "b { font-weight: bold; }"
)


def wrap_document(
    body: str,
    *,
    title: str = DEFAULT_TITLE,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """Wrap an HTML fragment in a complete page.

    Args:
        body: Rendered HTML fragment, inserted verbatim
        title: Page title (escaped)
        stylesheet: CSS placed in a <style> element, inserted verbatim

    Returns:
        The full HTML document

    Example:
        >>> wrap_document("<p>x</p>", title="A & B", stylesheet="")
        '<!DOCTYPE html><html><head><meta charset="utf-8"><title>A &amp; B</title><style></style></head><body><p>x</p></body></html>'
    """
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8">'
        f"<title>{html_escape(title)}</title>"
        f"<style>{stylesheet}</style>"
        f"</head><body>{body}</body></html>"
    )


__all__ = ["DEFAULT_STYLESHEET", "DEFAULT_TITLE", "wrap_document"]
