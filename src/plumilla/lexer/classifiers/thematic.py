"""Thematic break classifier mixin."""

from __future__ import annotations

import re

from plumilla.tokens import LineBreakToken, ThematicBreakToken, Token

# Three or more of the same marker, each optionally followed by spaces
_THEMATIC_BREAK_RE = re.compile(r"(?:\* *){3,}|(?:- *){3,}")


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    _source: str
    _pos: int

    def _find_line_end(self, start: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _commit_line(self, line_end: int) -> None:
        """Advance past a line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_thematic_break(self) -> list[Token] | None:
        """Try to scan a line made only of ``*`` or only of ``-`` markers."""
        line_end = self._find_line_end(self._pos)
        if _THEMATIC_BREAK_RE.fullmatch(self._source, self._pos, line_end) is None:
            return None

        self._commit_line(line_end)
        return [ThematicBreakToken(), LineBreakToken()]
