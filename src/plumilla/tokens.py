"""Token and TokenType definitions for the plumilla lexer.

The lexer produces a flat list of tokens that the parser consumes.
Each token kind is its own frozen dataclass carrying only the fields that
kind needs; the shared ``type`` class attribute identifies the kind.

Tokens carry no source offsets. The parser is driven purely by token order.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


class TokenType(Enum):
    """Token kinds produced by the lexer.

    Organized by category for clarity:
    - Block markers (headings, code blocks, quotes, lists, rules)
    - Inline content (text, links, images, code spans)
    - Line structure (LINE_BREAK)

    """

    # Block markers
    HEADING = auto()  # # Heading, or a setext underline
    CODE_BLOCK = auto()  # ```lang ... ```
    BLOCK_QUOTE = auto()  # > or > > ...
    LIST_ITEM = auto()  # -, *, 1.
    THEMATIC_BREAK = auto()  # ---, ***

    # Inline content
    TEXT = auto()
    CODE_SPAN = auto()  # `code`lang
    IMAGE = auto()  # ![alt](src)
    LINK = auto()  # [text](href)

    # Line structure
    LINE_BREAK = auto()  # End of a logical line


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens."""

    type: ClassVar[TokenType]


@dataclass(frozen=True, slots=True)
class HeadingToken(Token):
    """Start of a heading line. The heading text follows as inline tokens."""

    type: ClassVar[TokenType] = TokenType.HEADING

    level: int


@dataclass(frozen=True, slots=True)
class TextToken(Token):
    """A run of text with its emphasis flags."""

    type: ClassVar[TokenType] = TokenType.TEXT

    content: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class ListItemToken(Token):
    """List marker.

    Attributes:
        indent: Nesting hint (leading spaces divided by the indent width)
        ordered: True for ``1.`` style markers
        digit: The single ordinal digit for ordered markers, else None

    """

    type: ClassVar[TokenType] = TokenType.LIST_ITEM

    indent: int
    ordered: bool
    digit: int | None = None


@dataclass(frozen=True, slots=True)
class CodeBlockToken(Token):
    """Complete fenced code block, content kept verbatim."""

    type: ClassVar[TokenType] = TokenType.CODE_BLOCK

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class CodeSpanToken(Token):
    """Inline code with an optional trailing language tag."""

    type: ClassVar[TokenType] = TokenType.CODE_SPAN

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class BlockQuoteToken(Token):
    """Quote prefix; ``indent`` counts the ``>`` markers."""

    type: ClassVar[TokenType] = TokenType.BLOCK_QUOTE

    indent: int


@dataclass(frozen=True, slots=True)
class ImageToken(Token):
    type: ClassVar[TokenType] = TokenType.IMAGE

    alt: str
    src: str


@dataclass(frozen=True, slots=True)
class LinkToken(Token):
    type: ClassVar[TokenType] = TokenType.LINK

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class ThematicBreakToken(Token):
    type: ClassVar[TokenType] = TokenType.THEMATIC_BREAK


@dataclass(frozen=True, slots=True)
class LineBreakToken(Token):
    type: ClassVar[TokenType] = TokenType.LINE_BREAK


# Tokens that may appear inside an inline run
INLINE_TOKEN_TYPES = frozenset({TokenType.TEXT, TokenType.CODE_SPAN, TokenType.LINK})
