"""Output node tree."""

from .Element import Element, Node, to_html

__all__ = ["Element", "Node", "to_html"]
