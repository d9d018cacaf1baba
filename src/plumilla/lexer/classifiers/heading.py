"""ATX and setext heading classifier mixin."""

from __future__ import annotations

import re

from plumilla.errors import MalformedInputError
from plumilla.tokens import (
    HeadingToken,
    LineBreakToken,
    ThematicBreakToken,
    Token,
    TokenType,
)

_ATX_HEADING_RE = re.compile(r"(#{1,6}) ")
_SETEXT_UNDERLINE_RE = re.compile(r"(?:=+|-+) *")


class HeadingClassifierMixin:
    """Mixin providing heading classification.

    Both heading styles emit the same shape: the heading marker, the inline
    tokens of the heading text ending in a line break, then a thematic break
    and its line break when ``heading_rule`` is enabled.

    """

    _source: str
    _source_len: int
    _pos: int
    _heading_rule: bool

    def _find_line_end(self, start: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _commit_line(self, line_end: int) -> None:
        """Advance past a line. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line(self) -> list[Token]:
        """Tokenize rest of line. Implemented by InlineScannerMixin."""
        raise NotImplementedError

    def _try_scan_atx_heading(self) -> list[Token] | None:
        """Try to scan an ATX heading (``#`` to ``######`` then a space).

        Returns:
            Tokens for the heading line, or None if the line is not a heading.
        """
        match = _ATX_HEADING_RE.match(self._source, self._pos)
        if match is None:
            return None

        self._pos = match.end()
        tokens: list[Token] = [HeadingToken(len(match.group(1)))]
        tokens.extend(self._scan_line())
        return self._close_heading(tokens)

    def _try_scan_setext_heading(self) -> list[Token] | None:
        """Try to scan a text line underlined with ``=`` or ``-``.

        ``=`` gives level 1, ``-`` level 2. The underline is consumed and
        produces no tokens of its own.

        Returns:
            Tokens for the heading, or None if the next line is no underline.

        Raises:
            MalformedInputError: If the underline starts with another character.
        """
        line_end = self._find_line_end(self._pos)
        if line_end == self._pos or line_end >= self._source_len:
            return None

        underline_start = line_end + 1
        underline_end = self._find_line_end(underline_start)
        if _SETEXT_UNDERLINE_RE.fullmatch(self._source, underline_start, underline_end) is None:
            return None

        marker = self._source[underline_start]
        if marker == "=":
            level = 1
        elif marker == "-":
            level = 2
        else:
            raise MalformedInputError(
                f"setext underline must use '=' or '-', found {marker!r}",
                offset=underline_start,
            )

        tokens: list[Token] = [HeadingToken(level)]
        tokens.extend(self._scan_line())
        self._commit_line(underline_end)
        return self._close_heading(tokens)

    def _close_heading(self, tokens: list[Token]) -> list[Token]:
        # Heading text must end in its own line break even at end of input
        if tokens[-1].type is not TokenType.LINE_BREAK:
            tokens.append(LineBreakToken())
        if self._heading_rule:
            tokens.append(ThematicBreakToken())
            tokens.append(LineBreakToken())
        else:
            # Extra break keeps the next line out of the heading text
            tokens.append(LineBreakToken())
        return tokens
