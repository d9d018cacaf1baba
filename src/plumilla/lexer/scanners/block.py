"""Block scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from plumilla.tokens import LineBreakToken, Token


class BlockScannerMixin:
    """Mixin providing the block-level dispatch.

    Recognizers are tried in a fixed order at the start of each line:
    ATX heading, fenced code, block quote, thematic break, list item,
    setext heading, blank line. The first that matches wins; otherwise the
    line is inline content.

    """

    _source: str
    _pos: int

    # Classifier methods (provided by classifier mixins)
    def _try_scan_atx_heading(self) -> list[Token] | None:
        raise NotImplementedError

    def _try_scan_fenced_code(self) -> list[Token] | None:
        raise NotImplementedError

    def _try_scan_block_quote(self) -> list[Token] | None:
        raise NotImplementedError

    def _try_scan_thematic_break(self) -> list[Token] | None:
        raise NotImplementedError

    def _try_scan_list_item(self) -> list[Token] | None:
        raise NotImplementedError

    def _try_scan_setext_heading(self) -> list[Token] | None:
        raise NotImplementedError

    def _scan_line(self) -> list[Token]:
        raise NotImplementedError

    def _block_recognizers(self) -> tuple[Callable[[], list[Token] | None], ...]:
        return (
            self._try_scan_atx_heading,
            self._try_scan_fenced_code,
            self._try_scan_block_quote,
            self._try_scan_thematic_break,
            self._try_scan_list_item,
            self._try_scan_setext_heading,
            self._try_scan_blank_line,
        )

    def _scan_block(self) -> list[Token]:
        """Scan one or more lines starting at the current position.

        Always advances the position by at least one character.
        """
        for recognizer in self._block_recognizers():
            tokens = recognizer()
            if tokens is not None:
                return tokens
        return self._scan_line()

    def _try_scan_blank_line(self) -> list[Token] | None:
        if self._source[self._pos] != "\n":
            return None
        self._pos += 1
        return [LineBreakToken()]
