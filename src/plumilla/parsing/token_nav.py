"""Token navigation utilities for the plumilla parser.

Provides bounded lookahead over the token list and consume-or-fail
primitives. The parser never looks more than two tokens past the current one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from plumilla.errors import ExhaustedTokensError, UnexpectedTokenError
from plumilla.tokens import INLINE_TOKEN_TYPES, Token, TokenType

T = TypeVar("T", bound=Token)

if TYPE_CHECKING:
    from collections.abc import Sequence


def describe(token: object) -> str:
    """Name a token kind for error messages."""
    if token is None:
        return "end of input"
    token_type = getattr(token, "type", None)
    if isinstance(token_type, TokenType):
        return token_type.name
    return type(token).__name__


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens))
        - _pos: int

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int

    def _at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self._pos >= self._tokens_len

    def _peek(self, offset: int = 0) -> Token | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _check(self, token_type: TokenType, offset: int = 0) -> bool:
        """Check the kind of the token at offset without consuming it."""
        token = self._peek(offset)
        return token is not None and token.type is token_type

    def _check_inline(self, offset: int = 0) -> bool:
        """Check whether the token at offset can appear in an inline run."""
        token = self._peek(offset)
        return token is not None and token.type in INLINE_TOKEN_TYPES

    def _advance(self) -> Token:
        """Consume and return the current token.

        Raises:
            ExhaustedTokensError: If no tokens remain.
        """
        if self._pos >= self._tokens_len:
            raise ExhaustedTokensError("any token", self._pos)
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, token_class: type[T]) -> T:
        """Consume the current token, which must be a ``token_class``.

        Raises:
            ExhaustedTokensError: If no tokens remain.
            UnexpectedTokenError: If the current token is of another kind.
        """
        expected = token_class.type.name
        if self._pos >= self._tokens_len:
            raise ExhaustedTokensError(expected, self._pos)

        token = self._tokens[self._pos]
        if not isinstance(token, token_class):
            raise UnexpectedTokenError(expected, describe(token), self._pos)

        self._pos += 1
        return token
