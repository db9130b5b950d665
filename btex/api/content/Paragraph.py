"""Inline content container (UNO: single class)."""

from __future__ import annotations

import copy
import re

from ..dom.Element import Node
from .get_spacing_kind import get_spacing_kind
from .RenderOptions import RenderOptions
from .Span import InlineItem, Span
from .SpacingType import SpacingType

_WHITESPACE = re.compile(r"\s+")


class Paragraph:
    """Ordered inline content: plain text runs and styled spans."""

    def __init__(self, *items: InlineItem):
        self.items: list[InlineItem] = list(items)

    def append(self, *items: InlineItem) -> None:
        self.items.extend(items)

    def is_empty(self) -> bool:
        for item in self.items:
            if isinstance(item, Span):
                if not item.is_empty():
                    return False
            elif item.strip():
                return False
        return True

    def normalise(self) -> SpacingType:
        """Collapse whitespace in text runs and report edge spacing kinds."""
        self.items = [_WHITESPACE.sub(" ", item) if isinstance(item, str) else item for item in self.items]
        text = self.get_text().strip()
        if not text:
            return SpacingType()
        return SpacingType(first=get_spacing_kind(text[0]), last=get_spacing_kind(text[-1]))

    def clone(self) -> Paragraph:
        return copy.deepcopy(self)

    def get_text(self) -> str:
        return "".join(item if isinstance(item, str) else item.get_text() for item in self.items)

    def render_inner(self, options: RenderOptions | None = None) -> list[Node]:
        """Render the content without a surrounding block element."""
        nodes: list[Node] = []
        for item in self.items:
            if isinstance(item, str):
                if item:
                    nodes.append(item)
            else:
                nodes.extend(item.render(options))
        return nodes
