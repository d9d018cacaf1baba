"""HTML renderer using StringBuilder pattern.

Renders the typed AST to a single HTML string. No whitespace is inserted
between elements, and body text and code are written verbatim; only
attribute values and link text are escaped.

Thread Safety:
All per-render state lives in the StringBuilder created by render(). Multiple
threads can safely share a single HtmlRenderer instance.
"""

import html
import logging

from plumilla.errors import UnknownNodeKindError
from plumilla.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Heading,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    QuoteItem,
    Text,
    ThematicBreak,
)
from plumilla.stringbuilder import StringBuilder

logger = logging.getLogger(__name__)


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render AST to HTML using StringBuilder pattern.

    Usage:
        >>> from plumilla import build, scan
        >>> doc = build(scan("Hello **World**"))
        >>> HtmlRenderer().render(doc)
        '<p>Hello <b>World</b></p>'

    Thread Safety:
        Stateless between calls; share one instance freely.
    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Args:
            node: Document AST root

        Returns:
            HTML string

        Raises:
            UnknownNodeKindError: If the tree holds a node with no emitter.
        """
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)

        logger.debug("Rendered %d blocks to %d characters", len(node.children), sb.size)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Heading(level=level, children=children):
                sb.append(f"<h{level}>")
                self._render_inlines(children, sb)
                sb.append(f"</h{level}>")
            case Paragraph(children=children):
                sb.append("<p>")
                self._render_inlines(children, sb)
                sb.append("</p>")
            case CodeBlock(language=language, code=code):
                sb.append(f'<pre><code class="{html_escape(language)}">')
                sb.append(code)
                sb.append("</code></pre>")
            case BlockQuote():
                self._render_blockquote(block, sb)
            case List():
                self._render_list(block, sb)
            case ThematicBreak():
                sb.append("<hr>")
            case Image(alt=alt, src=src):
                sb.append(f'<img alt="{html_escape(alt)}" src="{html_escape(src)}">')
            case Link() | CodeSpan():
                self._render_inline(block, sb, "document")
            case _:
                raise UnknownNodeKindError(block, "document")

    def _render_blockquote(self, quote: BlockQuote, sb: StringBuilder) -> None:
        """Render block quote; items become paragraphs, deeper quotes recurse."""
        sb.append("<blockquote>")
        for child in quote.children:
            match child:
                case BlockQuote():
                    self._render_blockquote(child, sb)
                case QuoteItem(children=children):
                    sb.append("<p>")
                    self._render_inlines(children, sb)
                    sb.append("</p>")
                case _:
                    raise UnknownNodeKindError(child, "blockquote")
        sb.append("</blockquote>")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list."""
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>")
        for item in lst.children:
            if not isinstance(item, ListItem):
                raise UnknownNodeKindError(item, "list")
            sb.append("<li>")
            for child in item.children:
                if isinstance(child, List):
                    self._render_list(child, sb)
                else:
                    self._render_inline(child, sb, "list item")
            sb.append("</li>")
        sb.append(f"</{tag}>")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        """Render a sequence of inline nodes."""
        for inline in inlines:
            self._render_inline(inline, sb, "inline content")

    def _render_inline(self, inline: Inline, sb: StringBuilder, context: str) -> None:
        """Render an inline node."""
        match inline:
            case Text(content=content, bold=bold, italic=italic):
                if bold:
                    content = f"<b>{content}</b>"
                if italic:
                    content = f"<i>{content}</i>"
                sb.append(content)
            case Link(text=text, href=href):
                sb.append(f'<a href="{html_escape(href)}">{html_escape(text)}</a>')
            case CodeSpan(language=language, code=code):
                sb.append(f'<code class="{html_escape(language)}">{code}</code>')
            case _:
                raise UnknownNodeKindError(inline, context)
