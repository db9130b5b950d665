"""Styled inline span (UNO: single class)."""

from __future__ import annotations

import copy
from typing import Union

from ..dom.Element import Element, Node
from .format_style import format_style
from .RenderOptions import RenderOptions
from .SpanStyle import SpanStyle

InlineItem = Union[str, "Span"]


class Span:
    """A run of inline items sharing one style."""

    def __init__(self, style: SpanStyle | None = None):
        self.style = style or SpanStyle()
        self.items: list[InlineItem] = []

    def append(self, *items: InlineItem) -> None:
        self.items.extend(items)

    def is_empty(self) -> bool:
        return all(not item.strip() if isinstance(item, str) else item.is_empty() for item in self.items)

    def get_text(self) -> str:
        return "".join(item if isinstance(item, str) else item.get_text() for item in self.items)

    def clone(self) -> Span:
        return copy.deepcopy(self)

    def render(self, options: RenderOptions | None = None) -> list[Node]:
        options = options or RenderOptions()
        span = Element("span")
        style = format_style(self.style, options)
        if style:
            span.set_attribute("style", style)
        if self.style.classes:
            span.set_attribute("class", self.style.classes)
        for item in self.items:
            if isinstance(item, str):
                span.append(item)
            else:
                span.append(*item.render(options))
        return [span]
