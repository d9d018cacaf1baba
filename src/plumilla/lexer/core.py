"""Line-oriented lexer for plumilla.

Every scan step starts at the beginning of a physical line. Block
recognizers are tried in a fixed order against the unconsumed input; the first
one that matches consumes its lines and emits tokens. A line no recognizer
claims is tokenized as inline content.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from plumilla.config import get_compile_config
from plumilla.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from plumilla.lexer.scanners import BlockScannerMixin, InlineScannerMixin
from plumilla.tokens import LineBreakToken, Token, TokenType


class Lexer(
    # Inline scanner precedes the classifiers that call _scan_line
    InlineScannerMixin,
    # Classifiers (recognize one block construct each)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
    ListClassifierMixin,
    # Block dispatch last so classifier implementations win over its stubs
    BlockScannerMixin,
):
    """Line-oriented lexer producing a flat token list.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        HeadingToken(level=1)
        TextToken(content='Hello', bold=False, italic=False)
        LineBreakToken()
        ThematicBreakToken()
        LineBreakToken()
        LineBreakToken()
        TextToken(content='World', bold=False, italic=False)
        LineBreakToken()

    Configuration:
        The list indent width and the heading rule switch are read from the
        active CompileConfig when the lexer is created.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_list_indent_width",
        "_heading_rule",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
        """
        config = get_compile_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._list_indent_width = config.list_indent_width
        self._heading_rule = config.heading_rule

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        The stream of a non-empty source always ends with a LineBreakToken,
        appended here when the last line had no trailing newline.

        Yields:
            Token objects in source order
        """
        last: Token | None = None
        while self._pos < self._source_len:
            for token in self._scan_block():
                last = token
                yield token

        if last is not None and last.type is not TokenType.LINE_BREAK:
            yield LineBreakToken()

    # =========================================================================
    # Line navigation helpers
    # =========================================================================

    def _find_line_end(self, start: int) -> int:
        """Find the end of the line containing ``start``.

        Returns:
            Position of the newline, or end of source.
        """
        idx = self._source.find("\n", start)
        return idx if idx != -1 else self._source_len

    def _commit_line(self, line_end: int) -> None:
        """Advance past ``line_end`` and its newline, if any."""
        self._pos = min(line_end + 1, self._source_len)
