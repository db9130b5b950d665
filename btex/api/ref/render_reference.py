"""Reference rendering (UNO: single function)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..content.format_style import format_style
from ..content.RenderOptions import RenderOptions
from ..dom.Element import Element, Node
from .Resolution import ExternalUrlResolution, TargetResolution

if TYPE_CHECKING:
    from .ReferenceNode import ReferenceNode

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def render_reference(node: ReferenceNode, options: RenderOptions | None = None) -> list[Node]:
    """Render a normalised reference to output nodes.

    Reads node state only; calling it again yields an equal tree.
    """
    options = options or RenderOptions()
    resolution = node.resolve(options.category_prefixes)

    span = Element("span")
    style = format_style(node.style, options)
    if style:
        span.set_attribute("style", style)
    if node.style.classes:
        span.set_attribute("class", node.style.classes)

    if isinstance(resolution, TargetResolution):
        nodes = resolution.target.paragraph.render_inner(options)
        if not resolution.linked:
            return nodes

        link = Element("a", {"href": "#" + quote(resolution.target.bookmark_id, safe=_URI_COMPONENT_SAFE)})
        link.append(*nodes)
        span.append(link)
        return [span]

    if isinstance(resolution, ExternalUrlResolution):
        link = Element("a")
        link.add_class("external")
        link.set_attribute("href", resolution.url)
        link.append(*node.paragraph.render_inner(options))
        span.append(link)
        return [span]

    ref = Element("btex-ref")
    if resolution.key:
        ref.set_attribute("data-key", resolution.key)
    if resolution.page:
        ref.set_attribute("data-page", resolution.page)
    span.append(ref)

    if not resolution.linked:
        return [span]

    link = Element("btex-link")
    if resolution.key:
        link.set_attribute("data-key", resolution.key)
    if resolution.page:
        link.set_attribute("data-page", resolution.page)
    if resolution.is_category:
        link.set_attribute("data-is-category", "True")

    if node.paragraph.is_empty():
        link.append(span)
    elif not resolution.is_category:
        link.append(*node.paragraph.render_inner(options))
    return [link]
