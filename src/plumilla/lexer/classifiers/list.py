"""List marker classifier mixin."""

from __future__ import annotations

import re

from plumilla.tokens import ListItemToken, Token

# Leading spaces, then "-", "*" or a single digit and ".", then a space
_LIST_MARKER_RE = re.compile(r"( *)(?:([0-9])\.|[*-]) ")


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    _source: str
    _pos: int
    _list_indent_width: int

    def _scan_line(self) -> list[Token]:
        """Tokenize rest of line. Implemented by InlineScannerMixin."""
        raise NotImplementedError

    def _try_scan_list_item(self) -> list[Token] | None:
        """Try to scan a list marker and the rest of its line.

        Indent is ``leading_spaces // list_indent_width``. Ordered markers are
        a single digit; ``10.`` is not a marker.
        """
        match = _LIST_MARKER_RE.match(self._source, self._pos)
        if match is None:
            return None

        digit = match.group(2)
        marker = ListItemToken(
            indent=len(match.group(1)) // self._list_indent_width,
            ordered=digit is not None,
            digit=int(digit) if digit is not None else None,
        )
        self._pos = match.end()
        tokens: list[Token] = [marker]
        tokens.extend(self._scan_line())
        return tokens
