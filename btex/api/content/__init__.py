"""Inline content domain: paragraphs, spans and styles."""

from .format_style import format_style
from .get_spacing_kind import get_spacing_kind
from .Paragraph import Paragraph
from .RenderOptions import RenderOptions
from .SpacingType import CJK, LETTER, SpacingType
from .Span import Span
from .SpanStyle import SpanStyle

__all__ = [
    "CJK",
    "LETTER",
    "Paragraph",
    "RenderOptions",
    "SpacingType",
    "Span",
    "SpanStyle",
    "format_style",
    "get_spacing_kind",
]
