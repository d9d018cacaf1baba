"""Block parsing subsystem for the plumilla parser.

Provides mixins for parsing block-level content:
- core: block dispatch, headings, code blocks, rules, images, paragraphs
- list: nested lists from indent hints
- quote: nested block quotes from marker depth

"""

from plumilla.parsing.blocks.core import BlockParsingCoreMixin
from plumilla.parsing.blocks.list import ListParsingMixin
from plumilla.parsing.blocks.quote import QuoteParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
    QuoteParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Methods:
        - _peek(offset) -> Token | None
        - _check(token_type, offset) -> bool
        - _advance() -> Token
        - _expect(token_class) -> Token
        - _parse_inline() -> tuple[Inline, ...]
        - _parse_quote_inline(depth) -> tuple[Inline, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
    "QuoteParsingMixin",
]
