"""Core block parsing for the plumilla parser.

Provides block dispatch and the single-line block rules (headings, code
blocks, thematic breaks, images, paragraphs).
"""

from __future__ import annotations

from plumilla.errors import UnexpectedTokenError
from plumilla.nodes import (
    Block,
    CodeBlock,
    Heading,
    Image,
    Paragraph,
    ThematicBreak,
)
from plumilla.parsing.token_nav import describe
from plumilla.tokens import (
    BlockQuoteToken,
    CodeBlockToken,
    CodeSpanToken,
    HeadingToken,
    ImageToken,
    LineBreakToken,
    LinkToken,
    ListItemToken,
    TextToken,
    ThematicBreakToken,
)


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Methods:
        - _peek(offset) -> Token | None
        - _advance() -> Token
        - _expect(token_class) -> Token
        - _parse_inline() -> tuple[Inline, ...]
        - _parse_list() -> List
        - _parse_block_quote() -> BlockQuote

    """

    def _parse_block(self) -> Block | None:
        """Parse a single block element.

        Returns:
            The block, or None when a stray line break was consumed.

        Raises:
            UnexpectedTokenError: If no block can start with the current token.
        """
        token = self._peek()
        match token:
            case HeadingToken():
                return self._parse_heading()
            case CodeBlockToken():
                return self._parse_code_block()
            case BlockQuoteToken():
                return self._parse_block_quote()
            case ThematicBreakToken():
                return self._parse_thematic_break()
            case ListItemToken():
                return self._parse_list()
            case ImageToken():
                return self._parse_image()
            case TextToken() | CodeSpanToken() | LinkToken():
                return self._parse_paragraph()
            case LineBreakToken():
                self._advance()
                return None
        raise UnexpectedTokenError("block", describe(token), self._pos)

    def _parse_heading(self) -> Heading:
        token = self._expect(HeadingToken)
        return Heading(level=token.level, children=self._parse_inline())

    def _parse_code_block(self) -> CodeBlock:
        token = self._expect(CodeBlockToken)
        self._expect(LineBreakToken)
        return CodeBlock(language=token.language, code=token.code)

    def _parse_thematic_break(self) -> ThematicBreak:
        self._expect(ThematicBreakToken)
        self._expect(LineBreakToken)
        return ThematicBreak()

    def _parse_image(self) -> Image:
        token = self._expect(ImageToken)
        self._expect(LineBreakToken)
        return Image(alt=token.alt, src=token.src)

    def _parse_paragraph(self) -> Paragraph:
        return Paragraph(children=self._parse_inline())
