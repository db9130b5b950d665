"""Reference binding (UNO: single function)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ..content.SpanStyle import SpanStyle
from .EXTERNAL_URL_PATTERN import EXTERNAL_URL_PATTERN

if TYPE_CHECKING:
    from ..context.Context import Context
    from .ReferenceNode import ReferenceNode

logger = get_logger("ref")


def bind_reference(node: ReferenceNode, context: Context) -> None:
    """Read the reference's attributes from the context it is entered into.

    Style attributes are inherited; ``ref-*`` attributes must be declared on
    the reference itself. An accepted URL is registered in the context's
    external link collection, anything else is dropped.
    """
    classes = ""
    if context.get_boolean("text-class-header", False):
        classes += " item-header"

    node.style = SpanStyle(
        italic=context.get_boolean("text-italic", False) or None,
        bold=context.get_boolean("text-bold", False) or None,
        font_size=context.get_float("text-size", 0) or None,
        classes=classes.strip(),
    )

    node.page = context.get("ref-page", True)
    node.key = context.get("ref-key", True)
    node.url = context.get("ref-url", True)
    node.page_suffix = context.get("ref-page-suffix", True)
    node.infer_page = context.get_boolean("ref-infer-page", False, True)
    node.no_link = context.get_boolean("ref-no-link", False, True)

    if node.url and EXTERNAL_URL_PATTERN.match(node.url):
        context.external_links.append(node.url)
    else:
        if node.url:
            logger.debug("Discarding reference URL %r: not an external http(s) link", node.url)
        node.url = None
