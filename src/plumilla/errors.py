"""Exception classes for plumilla.

Every stage of the pipeline fails fast: a scanner, builder or renderer error
aborts the whole compilation. The hierarchy lets callers tell the stages apart
or catch :class:`PlumillaError` for all of them.
"""

from __future__ import annotations

from typing import Any


class PlumillaError(Exception):
    """Base exception for all plumilla errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(PlumillaError):
    """Error raised by the lexer."""

    pass


class MalformedInputError(ScanError):
    """Recognized syntax turned out to be internally inconsistent.

    Raised when a recognizer matched but the matched text violates an
    invariant that the recognizer itself is supposed to guarantee.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize with an optional source offset.

        Args:
            message: Description of the violated invariant
            offset: Offset into the source where the construct starts
        """
        self.message = message
        self.offset = offset

        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class ParseError(PlumillaError):
    """Error while building the tree from tokens.

    The token stream did not match the grammar the tree builder expects.
    """

    pass


class UnexpectedTokenError(ParseError):
    """The token at the current position is not the one the grammar requires."""

    def __init__(self, expected: str, actual: str, position: int) -> None:
        """Initialize with expectation context.

        Args:
            expected: Name of the expected token kind (or "block")
            actual: Name of the token kind actually found
            position: Index of the offending token in the stream
        """
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(f"token {position}: expected {expected}, found {actual}")


class ExhaustedTokensError(ParseError):
    """The token stream ended while a token was still required."""

    def __init__(self, expected: str, position: int) -> None:
        """Initialize with expectation context.

        Args:
            expected: Name of the expected token kind
            position: Index one past the last token
        """
        self.expected = expected
        self.position = position
        super().__init__(f"token {position}: expected {expected}, but no tokens remain")


class RenderError(PlumillaError):
    """Error during HTML rendering."""

    pass


class UnknownNodeKindError(RenderError):
    """The renderer reached a node it has no emitter for.

    Only possible when a tree was assembled by hand or the builder and
    renderer disagree about which nodes may appear where.
    """

    def __init__(self, node: Any, context: str = "document") -> None:
        """Initialize with the offending node.

        Args:
            node: The node that could not be rendered
            context: Where the node was found (e.g. "list", "inline")
        """
        self.node = node
        self.context = context
        super().__init__(f"cannot render {type(node).__name__} in {context}: {node!r}")
