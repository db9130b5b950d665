"""Page identifier inference (UNO: single function)."""

import re

from ..content.Paragraph import Paragraph
from ..content.scripts import CJK, HAN
from ..content.Span import Span
from ..content.SpacingType import CJK as CJK_SPACING
from .GREEK_SYMBOL_NAMES import GREEK_SYMBOL_NAMES

_CJK_START = re.compile(f"^[{CJK}]")
_FENCED_GAP = re.compile(f"([\\w{HAN}])_+([\\w{HAN}])", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_GREEK_FENCES = str.maketrans({symbol: f"_{name}_" for symbol, name in GREEK_SYMBOL_NAMES.items()})


def infer_page_identifier(paragraph: Paragraph, page_suffix: str | None = None, spacing_kind: str = "letter") -> str:
    """Derive a canonical page identifier from inline content.

    Greek letters are spelled out between underscore fences. A fence that
    ends up between two word or Han characters becomes a single space;
    every other fence disappears. Whitespace is then collapsed and trimmed.

    Args:
        paragraph: Visible content of the reference (left untouched)
        page_suffix: Text appended to the content before inference
        spacing_kind: Spacing kind at the trailing edge of the content

    Returns:
        Page identifier without underscores or zero-width spaces
    """
    content = paragraph.clone()
    if page_suffix:
        no_space = spacing_kind == CJK_SPACING and bool(_CJK_START.match(page_suffix))
        suffix = Span()
        if not no_space:
            suffix.append(" ")
        suffix.append(page_suffix)
        content.append(suffix)

    page = content.get_text()
    page = page.replace("_", " ")
    page = page.translate(_GREEK_FENCES)
    page = page.replace("\u200b", "")
    page = _FENCED_GAP.sub(r"\1 \2", page)
    page = page.replace("_", "")
    return _WHITESPACE.sub(" ", page).strip()
