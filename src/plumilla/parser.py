"""Token-driven tree builder producing a typed AST.

Consumes the flat token list from Lexer and builds an immutable Document.
Lookahead is bounded to the current token plus two more; every rule either
consumes the tokens it needs or fails immediately.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline runs and soft wraps
- `BlockParsingMixin`: Block rules, list stack, quote depth map

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Safe to share AST across threads

"""

from __future__ import annotations

from collections.abc import Sequence

from plumilla.nodes import Block, Document
from plumilla.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from plumilla.tokens import Token
from plumilla.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Tree builder for plumilla token streams.

    Usage:
            >>> from plumilla.lexer import Lexer
            >>> tokens = list(Lexer("# Hello").tokenize())
            >>> Parser(tokens).parse().children[0]
        Heading(level=1, children=(Text(content='Hello', bold=False, italic=False),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        token list. The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
    )

    def __init__(self, tokens: Sequence[Token]) -> None:
        """Initialize parser with a token list.

        Args:
            tokens: Tokens produced by Lexer.tokenize()
        """
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0

    def parse(self) -> Document:
        """Build the document tree.

        Returns:
            Document holding every top-level block in source order

        Raises:
            UnexpectedTokenError: If a token appears where the grammar forbids it.
            ExhaustedTokensError: If the tokens end inside a construct.
        """
        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        logger.debug("Built %d blocks from %d tokens", len(blocks), self._tokens_len)
        return Document(children=tuple(blocks))
