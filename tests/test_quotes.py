"""Tests for block quote building from marker depth."""

from plumilla import build, compile, scan
from plumilla.nodes import BlockQuote, Paragraph, QuoteItem, Text
from plumilla.tokens import BlockQuoteToken, LineBreakToken, TextToken


class TestSingleDepth:
    def test_one_line(self) -> None:
        assert build(scan("> quoted")).children == (
            BlockQuote(children=(QuoteItem(children=(Text("quoted"),)),)),
        )

    def test_consecutive_lines_soft_wrap(self) -> None:
        assert compile("> a\n> b") == "<blockquote><p>a b</p></blockquote>"

    def test_blank_quote_line_separates_items(self) -> None:
        (quote,) = build(scan("> a\n>\n> b")).children
        assert quote == BlockQuote(
            children=(
                QuoteItem(children=(Text("a"),)),
                QuoteItem(children=(Text("b"),)),
            )
        )

    def test_quote_ends_at_unquoted_line(self) -> None:
        doc = build(scan("> a\nb"))
        assert doc.children == (
            BlockQuote(children=(QuoteItem(children=(Text("a"),)),)),
            Paragraph(children=(Text("b"),)),
        )

    def test_empty_first_item(self) -> None:
        assert compile(">") == "<blockquote><p></p></blockquote>"


class TestNesting:
    def test_deeper_line_wraps_into_current_item(self) -> None:
        # A deeper prefix followed by text continues the open item
        assert compile("> a\n> > b") == "<blockquote><p>a b</p></blockquote>"

    def test_nested_quote_after_blank_line(self) -> None:
        html = compile("> a\n>\n> > b")
        assert html == "<blockquote><p>a</p><blockquote><p>b</p></blockquote></blockquote>"

    def test_shallower_line_returns_to_outer_quote(self) -> None:
        html = compile("> a\n>\n> > b\n> c")
        assert html == (
            "<blockquote><p>a</p><blockquote><p>b</p></blockquote><p>c</p></blockquote>"
        )

    def test_existing_depth_is_reused(self) -> None:
        (quote,) = build(scan("> a\n>\n> > b\n> c\n>\n> > d")).children
        nested = quote.children[1]
        assert isinstance(nested, BlockQuote)
        assert nested.children == (
            QuoteItem(children=(Text("b"),)),
            QuoteItem(children=(Text("d"),)),
        )
        assert quote.children[2] == QuoteItem(children=(Text("c"),))

    def test_root_registered_at_its_own_depth(self) -> None:
        tokens = [
            BlockQuoteToken(2),
            TextToken("deep"),
            LineBreakToken(),
            BlockQuoteToken(1),
            TextToken("shallow"),
            LineBreakToken(),
        ]
        (quote,) = build(tokens).children
        # Depth 1 has no quote yet and depth 0 has none, so it hangs off the root
        assert quote.children == (
            QuoteItem(children=(Text("deep"),)),
            BlockQuote(children=(QuoteItem(children=(Text("shallow"),)),)),
        )

    def test_sibling_items_share_one_quote(self) -> None:
        html = compile("> > a\n> >\n> > b")
        assert html == "<blockquote><p>a</p><p>b</p></blockquote>"
