"""Inline run assembly for the plumilla parser.

Headings, paragraphs, list items and quote items all hold a run of inline
nodes. A run continues across a line break when the next line starts with
inline content (a soft wrap, rendered as one space); otherwise the run ends
and its terminating line break is consumed.
"""

from __future__ import annotations

from plumilla.errors import UnexpectedTokenError
from plumilla.nodes import CodeSpan, Inline, Link, Text
from plumilla.parsing.token_nav import describe
from plumilla.tokens import (
    BlockQuoteToken,
    CodeSpanToken,
    LineBreakToken,
    LinkToken,
    TextToken,
    TokenType,
)

SOFT_WRAP = " "


class InlineParsingMixin:
    """Mixin providing inline run parsing.

    Required Host Methods:
        - _peek(offset) -> Token | None
        - _check(token_type, offset) -> bool
        - _check_inline(offset) -> bool
        - _advance() -> Token
        - _expect(token_class) -> Token

    """

    def _parse_inline(self) -> tuple[Inline, ...]:
        """Parse an inline run and its terminating line break."""
        children: list[Inline] = []
        while True:
            if self._check_inline():
                children.append(self._parse_inline_single())
            elif self._check(TokenType.LINE_BREAK) and self._check_inline(1):
                self._advance()
                children.append(Text(SOFT_WRAP))
            else:
                break

        self._expect(LineBreakToken)
        return tuple(children)

    def _parse_quote_inline(self, depth: int) -> tuple[Inline, ...]:
        """Parse the inline run of a quote item at ``depth``.

        A line break is a soft wrap only when the next line carries a quote
        prefix at least ``depth`` deep followed by inline content.
        """
        children: list[Inline] = []
        while True:
            if self._check_inline():
                children.append(self._parse_inline_single())
            elif self._is_quote_soft_wrap(depth):
                self._advance()
                self._advance()
                children.append(Text(SOFT_WRAP))
            else:
                break

        self._expect(LineBreakToken)
        return tuple(children)

    def _is_quote_soft_wrap(self, depth: int) -> bool:
        if not self._check(TokenType.LINE_BREAK):
            return False
        marker = self._peek(1)
        return (
            isinstance(marker, BlockQuoteToken)
            and marker.indent >= depth
            and self._check_inline(2)
        )

    def _parse_inline_single(self) -> Inline:
        token = self._peek()
        match token:
            case TextToken(content, bold, italic):
                self._advance()
                return Text(content, bold=bold, italic=italic)
            case CodeSpanToken(language, code):
                self._advance()
                return CodeSpan(language=language, code=code)
            case LinkToken(text, href):
                self._advance()
                return Link(text=text, href=href)
        raise UnexpectedTokenError("inline content", describe(token), self._pos)
