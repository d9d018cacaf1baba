"""Inline scanner mixin.

Tokenizes the text of a single physical line. Constructs are tried in
priority order at each position so wider spans win over narrower ones:
``***both***``, ``**bold**``, ``*italic*``, images, links, code spans.
Characters that start none of them accumulate into a plain text run.
"""

from __future__ import annotations

import re

from plumilla.tokens import (
    CodeSpanToken,
    ImageToken,
    LineBreakToken,
    LinkToken,
    TextToken,
    Token,
)

_STRONG_EMPHASIS_RE = re.compile(r"\*{3}[^*]+?\*{3}|_{3}[^_]+?_{3}")
_STRONG_RE = re.compile(r"\*{2}[^*]+?\*{2}|_{2}[^_]+?_{2}")
_EMPHASIS_RE = re.compile(r"\*[^*]+?\*|_[^_]+?_")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]*)\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")
_CODE_SPAN_RE = re.compile(r"`(.+?)`([a-z]*)")

# (pattern, delimiter width, bold, italic), widest first
_EMPHASIS_RULES = (
    (_STRONG_EMPHASIS_RE, 3, True, True),
    (_STRONG_RE, 2, True, False),
    (_EMPHASIS_RE, 1, False, True),
)

# Characters that can start an inline construct
_INLINE_START_CHARS = frozenset("*_![`")


class InlineScannerMixin:
    """Mixin providing inline tokenization of the current line."""

    _source: str
    _source_len: int
    _pos: int

    def _find_line_end(self, start: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _commit_line(self, line_end: int) -> None:
        """Advance past a line. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line(self) -> list[Token]:
        """Consume the rest of the current line and tokenize it.

        The line's newline, if present, becomes a trailing LineBreakToken.

        Returns:
            Inline tokens; empty at end of input.
        """
        if self._pos >= self._source_len:
            return []

        line_end = self._find_line_end(self._pos)
        line = self._source[self._pos : line_end + 1]
        self._commit_line(line_end)
        return self._tokenize_inline(line)

    def _tokenize_inline(self, line: str) -> list[Token]:
        tokens: list[Token] = []
        line_len = len(line)
        text_start = 0
        pos = 0

        while pos < line_len:
            token, end = self._match_inline(line, pos)
            if token is not None:
                if text_start < pos:
                    tokens.append(TextToken(line[text_start:pos]))
                tokens.append(token)
                pos = text_start = end
                continue

            if line[pos] == "\n":
                if text_start < pos:
                    tokens.append(TextToken(line[text_start:pos]))
                tokens.append(LineBreakToken())
                return tokens

            pos += 1

        if text_start < line_len:
            tokens.append(TextToken(line[text_start:]))
        return tokens

    def _match_inline(self, line: str, pos: int) -> tuple[Token | None, int]:
        """Match one inline construct at ``pos``.

        Returns:
            (token, end) on a match, (None, pos) otherwise.
        """
        if line[pos] not in _INLINE_START_CHARS:
            return None, pos

        for pattern, width, bold, italic in _EMPHASIS_RULES:
            match = pattern.match(line, pos)
            if match is not None:
                content = match.group()[width:-width]
                return TextToken(content, bold=bold, italic=italic), match.end()

        match = _IMAGE_RE.match(line, pos)
        if match is not None:
            return ImageToken(alt=match.group(1), src=match.group(2)), match.end()

        match = _LINK_RE.match(line, pos)
        if match is not None:
            return LinkToken(text=match.group(1), href=match.group(2)), match.end()

        match = _CODE_SPAN_RE.match(line, pos)
        if match is not None:
            return CodeSpanToken(language=match.group(2), code=match.group(1)), match.end()

        return None, pos
