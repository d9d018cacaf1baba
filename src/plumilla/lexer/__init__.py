"""Line-oriented lexer for the plumilla Markdown compiler.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + line navigation)
├── classifiers/         # One mixin per block construct
│   ├── heading.py       # ATX and setext headings
│   ├── fence.py         # Fenced code
│   ├── quote.py         # Block quote prefix
│   ├── thematic.py      # Thematic break
│   └── list.py          # List markers
└── scanners/
    ├── block.py         # Recognizer order and dispatch
    └── inline.py        # Emphasis, links, images, code spans

Usage:
    >>> from plumilla.lexer import Lexer
    >>> tokens = list(Lexer("Hello *World*").tokenize())
    >>> tokens[1]
    TextToken(content='World', bold=False, italic=True)

"""

from plumilla.lexer.core import Lexer

__all__ = ["Lexer"]
