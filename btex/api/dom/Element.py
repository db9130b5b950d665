"""Output node model (UNO: single model)."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Union

Node = Union["Element", str]


@dataclass
class Element:
    """A rendered output element with ordered attributes and children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def add_class(self, name: str) -> None:
        classes = self.attributes.get("class", "").split()
        if name not in classes:
            classes.append(name)
        self.attributes["class"] = " ".join(classes)

    def append(self, *nodes: Node) -> None:
        self.children.extend(nodes)

    def to_html(self) -> str:
        """Serialize the element and its subtree to HTML."""
        attrs = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in self.attributes.items())
        inner = "".join(to_html(child) for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def to_html(node: Node) -> str:
    if isinstance(node, Element):
        return node.to_html()
    return html.escape(node, quote=False)
