"""Test unterminated fences - content must fall through to inline text.

An opening fence with no closing fence, or with nothing after it, is not a
code block. Nothing may be lost and compilation must not fail.
"""

import pytest

from plumilla import compile
from plumilla.lexer import Lexer
from plumilla.tokens import CodeSpanToken, LineBreakToken, TextToken, TokenType


class TestUnterminatedFence:
    """Fences that never close."""

    def test_no_code_block_token(self) -> None:
        tokens = list(Lexer("```js\ncode").tokenize())
        assert all(t.type is not TokenType.CODE_BLOCK for t in tokens)

    def test_opening_line_is_scanned_as_inline(self) -> None:
        tokens = list(Lexer("```js\ncode").tokenize())
        assert tokens == [
            CodeSpanToken(language="js", code="`"),
            LineBreakToken(),
            TextToken("code"),
            LineBreakToken(),
        ]

    def test_compiles_to_paragraph(self) -> None:
        assert compile("```js\ncode") == '<p><code class="js">`</code> code</p>'

    @pytest.mark.parametrize("source", ["```", "```js", "```\n", "```\n\n"])
    def test_fence_without_content_does_not_fail(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert tokens[-1] == LineBreakToken()
        assert isinstance(compile(source), str)

    def test_later_fence_still_closes(self) -> None:
        tokens = list(Lexer("```\na\n\nb\n```").tokenize())
        assert tokens[0].type is TokenType.CODE_BLOCK
        assert tokens[0].code == "a\n\nb\n"
