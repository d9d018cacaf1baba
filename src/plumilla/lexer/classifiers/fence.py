"""Fenced code classifier mixin."""

from __future__ import annotations

from plumilla.tokens import CodeBlockToken, LineBreakToken, Token
from plumilla.utils.logger import get_logger

logger = get_logger(__name__)

FENCE = "```"


class FenceClassifierMixin:
    """Mixin providing fenced code classification."""

    _source: str
    _source_len: int
    _pos: int

    def _find_line_end(self, start: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_fenced_code(self) -> list[Token] | None:
        """Try to scan a complete fenced code block.

        The rest of the opening line (trailing spaces removed) is the language.
        Content runs from the next line up to the closing fence, verbatim.

        Nothing is consumed unless the closing fence exists; an unterminated
        fence is left for the inline scanner to treat as text.

        Returns:
            [CodeBlockToken, LineBreakToken], or None.
        """
        if not self._source.startswith(FENCE, self._pos):
            return None

        line_end = self._find_line_end(self._pos)
        if line_end >= self._source_len:
            return None

        close = self._source.find(FENCE, line_end + 1)
        if close == -1:
            logger.debug("Unterminated code fence at offset %d, scanning as text", self._pos)
            return None

        language = self._source[self._pos + len(FENCE) : line_end].rstrip(" ")
        code = self._source[line_end + 1 : close]
        self._pos = close + len(FENCE)
        return [CodeBlockToken(language, code), LineBreakToken()]
