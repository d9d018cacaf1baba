"""Block quote parsing with a depth map.

Each quote prefix carries its depth (the number of ``>`` markers). The
first prefix creates the outer quote; later prefixes reuse the quote already
open at their depth or open a new one inside the quote one level up.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from plumilla.nodes import BlockQuote, QuoteItem
from plumilla.tokens import BlockQuoteToken, TokenType


@dataclass(slots=True)
class QuoteFrame:
    """Mutable block quote under construction."""

    children: list[QuoteItem | QuoteFrame] = field(default_factory=list)

    def freeze(self) -> BlockQuote:
        """Convert to an immutable BlockQuote node, recursively."""
        return BlockQuote(
            children=tuple(
                child.freeze() if isinstance(child, QuoteFrame) else child
                for child in self.children
            )
        )


class QuoteParsingMixin:
    """Block quote parsing methods.

    Required Host Methods:
        - _check(token_type, offset) -> bool
        - _advance() -> Token
        - _expect(token_class) -> Token
        - _parse_quote_inline(depth) -> tuple[Inline, ...]

    """

    def _parse_block_quote(self) -> BlockQuote:
        """Parse consecutive quote lines into a nested BlockQuote tree."""
        first = self._expect(BlockQuoteToken)
        root = QuoteFrame()
        root.children.append(self._parse_quote_item(first.indent))

        by_depth: dict[int, QuoteFrame] = {first.indent: root}

        while self._check(TokenType.BLOCK_QUOTE):
            marker = self._expect(BlockQuoteToken)

            # Blank quote line: separates items without closing the quote
            if self._check(TokenType.LINE_BREAK):
                self._advance()
                continue

            frame = by_depth.get(marker.indent)
            if frame is not None:
                frame.children.append(self._parse_quote_item(marker.indent))
                continue

            frame = QuoteFrame()
            frame.children.append(self._parse_quote_item(marker.indent))
            by_depth[marker.indent] = frame
            by_depth.get(marker.indent - 1, root).children.append(frame)

        return root.freeze()

    def _parse_quote_item(self, depth: int) -> QuoteItem:
        return QuoteItem(children=self._parse_quote_inline(depth))
