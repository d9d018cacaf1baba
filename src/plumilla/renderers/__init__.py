"""plumilla renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to compact HTML using StringBuilder pattern

"""

from plumilla.renderers.html import HtmlRenderer, html_escape

__all__ = ["HtmlRenderer", "html_escape"]
