"""Parsing subsystem for the plumilla tree builder.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream lookahead and consumption
- `InlineParsingMixin`: Inline runs with soft-wrap handling
- `BlockParsingMixin`: Block-level rules, list and quote nesting

Example:
    >>> from plumilla.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from plumilla.parsing.blocks import BlockParsingMixin
from plumilla.parsing.inline import InlineParsingMixin
from plumilla.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
]
