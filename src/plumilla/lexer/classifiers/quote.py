"""Block quote classifier mixin."""

from __future__ import annotations

import re

from plumilla.tokens import BlockQuoteToken, Token

# One or more ">" separated by single spaces, plus one optional space
_BLOCK_QUOTE_RE = re.compile(r">(?: >)* ?")


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    _source: str
    _pos: int

    def _scan_line(self) -> list[Token]:
        """Tokenize rest of line. Implemented by InlineScannerMixin."""
        raise NotImplementedError

    def _try_scan_block_quote(self) -> list[Token] | None:
        """Try to scan a quote prefix and the rest of its line.

        The token's indent is the number of ``>`` markers, so ``> > text``
        is depth 2.
        """
        match = _BLOCK_QUOTE_RE.match(self._source, self._pos)
        if match is None:
            return None

        self._pos = match.end()
        tokens: list[Token] = [BlockQuoteToken(match.group().count(">"))]
        tokens.extend(self._scan_line())
        return tokens
