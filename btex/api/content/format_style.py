"""Inline style formatter (UNO: single function)."""

import math

from .RenderOptions import RenderOptions
from .SpanStyle import SpanStyle


def _format_px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def format_style(style: SpanStyle, options: RenderOptions) -> str:
    """Build the inline ``style`` attribute for a span.

    Font size is clamped to the configured range and only emitted when
    set and finite. Returns an empty string when nothing applies.
    """
    styles: list[str] = []
    if style.italic:
        styles.append("font-style:italic")
    if style.bold:
        styles.append("font-weight:bold")
    if style.font_size and math.isfinite(style.font_size):
        font_size = min(max(style.font_size, options.min_font_size), options.max_font_size)
        styles.append(f"font-size:{_format_px(font_size)}px")
    return ";".join(styles)
