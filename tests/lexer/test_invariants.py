"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from plumilla.config import CompileConfig, compile_config_context
from plumilla.lexer import Lexer
from plumilla.tokens import TokenType

MARKUP_ALPHABET = "#*_-=`>![]() \nab1."


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(min_size=1, max_size=1000))
    @settings(max_examples=200)
    def test_always_ends_with_line_break(self, source: str) -> None:
        """Every non-empty source tokenizes to a stream ending in a line break."""
        tokens = list(Lexer(source).tokenize())

        assert tokens, "Non-empty source must produce tokens"
        assert tokens[-1].type is TokenType.LINE_BREAK

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        """Tokenizing the same source twice gives equal streams."""
        assert list(Lexer(source).tokenize()) == list(Lexer(source).tokenize())

    @given(st.text(alphabet="ab \n", max_size=200))
    @settings(max_examples=100)
    def test_plain_text_round_trips(self, source: str) -> None:
        """Text without markup is preserved exactly, line by line."""
        tokens = list(Lexer(source).tokenize())
        rebuilt = "".join(
            "\n" if t.type is TokenType.LINE_BREAK else t.content for t in tokens
        )
        expected = source if source.endswith("\n") or not source else source + "\n"
        assert rebuilt == expected


class TestSpecialCharacterHandling:
    """Test handling of special markdown characters."""

    @given(st.text(alphabet=MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_no_exceptions_on_special_chars(self, source: str) -> None:
        """Lexer should handle any combination of special chars without crashing."""
        tokens = list(Lexer(source).tokenize())
        if source:
            assert tokens[-1].type is TokenType.LINE_BREAK

    @given(st.text(alphabet="`\nx", max_size=100))
    @settings(max_examples=50)
    def test_backtick_combinations(self, source: str) -> None:
        """Various backtick combinations should not crash."""
        tokens = list(Lexer(source).tokenize())
        assert len(tokens) >= (1 if source else 0)

    @given(st.text(alphabet=">#-* \n", max_size=100))
    @settings(max_examples=50)
    def test_block_marker_combinations(self, source: str) -> None:
        """Various block marker combinations should not crash."""
        list(Lexer(source).tokenize())


class TestListIndentBounds:
    """List indent hints follow the configured width."""

    @given(
        st.lists(st.integers(min_value=0, max_value=20), min_size=1, max_size=10),
        st.integers(min_value=1, max_value=4),
    )
    @settings(max_examples=100)
    def test_indent_is_spaces_over_width(self, spaces: list[int], width: int) -> None:
        source = "\n".join(" " * n + "- item" for n in spaces)
        with compile_config_context(CompileConfig(list_indent_width=width)):
            tokens = list(Lexer(source).tokenize())

        markers = [t for t in tokens if t.type is TokenType.LIST_ITEM]
        assert [m.indent for m in markers] == [n // width for n in spaces]
