"""Span style model (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class SpanStyle:
    """Inline presentation attributes."""

    italic: bool | None = None
    bold: bool | None = None
    font_size: float | None = None
    classes: str = ""
