"""Block classifier mixins for the plumilla lexer.

Each mixin recognizes one block construct at the current line start. A
``_try_scan_*`` method either consumes input and returns the emitted tokens,
or returns None without moving the position.
"""

from plumilla.lexer.classifiers.fence import FenceClassifierMixin
from plumilla.lexer.classifiers.heading import HeadingClassifierMixin
from plumilla.lexer.classifiers.list import ListClassifierMixin
from plumilla.lexer.classifiers.quote import QuoteClassifierMixin
from plumilla.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
