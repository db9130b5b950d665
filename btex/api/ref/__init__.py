"""Ref domain: cross-reference binding, page inference, resolution and rendering."""

from .bind_reference import bind_reference
from .GREEK_SYMBOL_NAMES import GREEK_SYMBOL_NAMES
from .infer_page_identifier import infer_page_identifier
from .ReferenceNode import ReferenceNode
from .render_reference import render_reference
from .resolve_reference import resolve_reference
from .Resolution import ExternalUrlResolution, LookupResolution, Resolution, TargetResolution

__all__ = [
    "GREEK_SYMBOL_NAMES",
    "ExternalUrlResolution",
    "LookupResolution",
    "ReferenceNode",
    "Resolution",
    "TargetResolution",
    "bind_reference",
    "infer_page_identifier",
    "render_reference",
    "resolve_reference",
]
