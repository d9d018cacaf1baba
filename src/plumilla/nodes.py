"""Typed AST nodes for plumilla.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: a built tree is never modified by the renderer
- Pattern matching: ``match`` statements dispatch on node class

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── BlockQuote
│   ├── QuoteItem
│   ├── List
│   ├── ListItem
│   ├── ThematicBreak
│   └── Image
└── Inline (inline elements)
    ├── Text
    ├── Link
    └── CodeSpan

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Text run.

    Markdown: text, *italic*, **bold**, ***both***
    HTML: text, <i>text</i>, <b>text</b>, <i><b>text</b></i>

    """

    content: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](href)
    HTML: <a href="href">text</a>

    """

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code` or `code`lang
    HTML: <code class="lang">code</code>

    """

    language: str
    code: str


Inline: TypeAlias = Text | Link | CodeSpan


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX or setext heading.

    Markdown: # Heading or Heading\\n=======
    HTML: <h1>Heading</h1>

    """

    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block; soft-wrapped lines are joined by a single space.

    HTML: <p>text</p>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown: ```lang\\ncode\\n```
    HTML: <pre><code class="lang">code</code></pre>

    """

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class QuoteItem(Node):
    """One paragraph inside a block quote.

    HTML: <p>text</p>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote, possibly containing deeper quotes.

    Markdown: > text, > > nested
    HTML: <blockquote>...</blockquote>

    """

    children: tuple[BlockQuote | QuoteItem, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item: inline content, optionally followed by nested lists.

    HTML: <li>item</li>

    """

    children: tuple[Inline | List, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    ordered: bool
    children: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or ***
    HTML: <hr>

    """


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image on a line of its own.

    Markdown: ![alt](src)
    HTML: <img alt="alt" src="src">

    """

    alt: str
    src: str


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


Block: TypeAlias = (
    Heading
    | Paragraph
    | CodeBlock
    | BlockQuote
    | List
    | ThematicBreak
    | Image
    | Link
    | CodeSpan
)
