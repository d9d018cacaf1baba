"""Tests for nested list building from indent hints."""

import pytest

from plumilla import build, compile, scan
from plumilla.config import CompileConfig, compile_config_context
from plumilla.nodes import List, ListItem, Paragraph, Text
from plumilla.parser import Parser
from plumilla.tokens import LineBreakToken, ListItemToken, TextToken


def list_tokens(*indents: int) -> list:
    tokens: list = []
    for n, indent in enumerate(indents):
        tokens += [ListItemToken(indent=indent, ordered=False), TextToken(str(n)), LineBreakToken()]
    return tokens


def depths(lst: List, depth: int = 0) -> list[tuple[str, int]]:
    """Flatten a list tree to (item text, nesting depth) pairs."""
    result: list[tuple[str, int]] = []
    for item in lst.children:
        for child in item.children:
            if isinstance(child, List):
                result += depths(child, depth + 1)
            else:
                result.append((child.content, depth))
    return result


class TestFlatLists:
    def test_unordered(self) -> None:
        doc = build(scan("- a\n- b"))
        assert doc.children == (
            List(
                ordered=False,
                children=(
                    ListItem(children=(Text("a"),)),
                    ListItem(children=(Text("b"),)),
                ),
            ),
        )

    def test_ordered(self) -> None:
        (lst,) = build(scan("1. a\n2. b")).children
        assert lst.ordered is True
        assert len(lst.children) == 2

    def test_first_marker_decides_kind(self) -> None:
        (lst,) = build(scan("1. a\n- b")).children
        assert lst.ordered is True
        assert len(lst.children) == 2

    def test_blank_line_ends_list(self) -> None:
        doc = build(scan("- a\n\n- b"))
        assert len(doc.children) == 2
        assert all(isinstance(block, List) for block in doc.children)

    def test_item_soft_wraps(self) -> None:
        (lst,) = build(scan("- a\nb")).children
        assert lst.children[0].children == (Text("a"), Text(" "), Text("b"))


class TestNesting:
    def test_nested_list_hangs_off_last_item(self) -> None:
        assert compile("- a\n  - b") == "<ul><li>a<ul><li>b</li></ul></li></ul>"

    def test_jump_is_clamped_to_one_level(self) -> None:
        (lst,) = build(list_tokens(0, 5, 1)).children
        assert depths(lst) == [("0", 0), ("1", 1), ("2", 1)]

    def test_return_to_outer_level(self) -> None:
        (lst,) = build(list_tokens(0, 1, 2, 0)).children
        assert depths(lst) == [("0", 0), ("1", 1), ("2", 2), ("3", 0)]

    def test_partial_return(self) -> None:
        (lst,) = build(list_tokens(0, 1, 2, 1)).children
        assert depths(lst) == [("0", 0), ("1", 1), ("2", 2), ("3", 1)]

    def test_nested_kind_comes_from_its_first_marker(self) -> None:
        (lst,) = build(scan("- a\n  1. b\n  2. c")).children
        nested = lst.children[0].children[-1]
        assert isinstance(nested, List)
        assert nested.ordered is True
        assert len(nested.children) == 2

    def test_first_item_indent_is_ignored(self) -> None:
        (lst,) = build(list_tokens(3, 3)).children
        # The stack is seeded at level 0, so the second item nests once
        assert depths(lst) == [("0", 0), ("1", 1)]

    def test_wider_indent_width(self) -> None:
        with compile_config_context(CompileConfig(list_indent_width=4)):
            html = compile("- a\n  - b\n    - c")
        assert html == "<ul><li>a</li><li>b<ul><li>c</li></ul></li></ul>"

    def test_list_then_paragraph(self) -> None:
        doc = build(scan("- a\n\ntext"))
        assert isinstance(doc.children[0], List)
        assert doc.children[1] == Paragraph(children=(Text("text"),))


class TestListFrame:
    @pytest.mark.parametrize("indents", [(0,), (0, 1), (0, 1, 1, 0), (0, 4, 4, 2, 0)])
    def test_every_item_survives(self, indents: tuple[int, ...]) -> None:
        (lst,) = Parser(list_tokens(*indents)).parse().children
        assert [text for text, _ in depths(lst)] == [str(n) for n in range(len(indents))]
