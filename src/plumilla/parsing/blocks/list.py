"""List parsing with indent-stack nesting.

List markers carry a flat indent hint. Nesting is rebuilt with an explicit
stack of (list, level) frames seeded with the first item at level 0. An
item may be at most one level deeper than the current top, so any jump in
leading spaces nests exactly one level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from plumilla.errors import ParseError
from plumilla.nodes import Inline, List, ListItem
from plumilla.tokens import ListItemToken, TokenType


@dataclass(slots=True)
class ListFrame:
    """Mutable list under construction.

    Each entry of ``items`` holds the children of one list item: inline
    nodes followed by any nested ListFrames.
    """

    ordered: bool
    items: list[list[Inline | ListFrame]] = field(default_factory=list)

    def freeze(self) -> List:
        """Convert to an immutable List node, recursively."""
        return List(
            ordered=self.ordered,
            children=tuple(
                ListItem(
                    children=tuple(
                        child.freeze() if isinstance(child, ListFrame) else child
                        for child in item
                    )
                )
                for item in self.items
            ),
        )


class ListParsingMixin:
    """List parsing methods.

    Required Host Methods:
        - _check(token_type, offset) -> bool
        - _expect(token_class) -> Token
        - _parse_inline() -> tuple[Inline, ...]

    """

    def _parse_list(self) -> List:
        """Parse consecutive list items into a nested List tree."""
        first = self._expect(ListItemToken)
        root = ListFrame(ordered=first.ordered)
        root.items.append(list(self._parse_inline()))

        stack: list[tuple[ListFrame, int]] = [(root, 0)]

        while self._check(TokenType.LIST_ITEM):
            marker = self._expect(ListItemToken)
            top, top_level = stack[-1]
            level = min(top_level + 1, marker.indent)

            if level > top_level:
                if not top.items:
                    raise ParseError("nested list has no parent list item")
                nested = ListFrame(ordered=marker.ordered)
                nested.items.append(list(self._parse_inline()))
                top.items[-1].append(nested)
                stack.append((nested, level))
                continue

            while stack[-1][1] > level:
                stack.pop()
            stack[-1][0].items.append(list(self._parse_inline()))

        return root.freeze()
