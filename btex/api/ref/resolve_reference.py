"""Reference resolution (UNO: single function)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..config.RefConfig import DEFAULT_CATEGORY_PREFIXES
from .Resolution import ExternalUrlResolution, LookupResolution, Resolution, TargetResolution

if TYPE_CHECKING:
    from .ReferenceNode import ReferenceNode


def resolve_reference(node: ReferenceNode, category_prefixes: Iterable[str] = DEFAULT_CATEGORY_PREFIXES) -> Resolution:
    """Decide how a normalised reference resolves.

    A label target wins over an external URL, which wins over key/page
    lookup. Only inferred pages can land in the category namespace.
    """
    if node.target is not None:
        return TargetResolution(target=node.target, linked=not node.no_link)

    if node.url:
        return ExternalUrlResolution(url=node.url)

    is_category = bool(node.infer_page and node.page and node.page.startswith(tuple(category_prefixes)))
    return LookupResolution(
        key=node.key,
        page=node.page,
        inferred=node.infer_page,
        linked=not node.no_link,
        is_category=is_category,
    )
