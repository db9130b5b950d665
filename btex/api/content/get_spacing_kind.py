"""Spacing kind classifier (UNO: single function)."""

import re

from .scripts import CJK as CJK_RANGES
from .SpacingType import CJK, LETTER

_CJK_CHAR = re.compile(f"[{CJK_RANGES}　-〿＀-｠]")


def get_spacing_kind(char: str) -> str:
    """Classify a single character as ``cjk`` or ``letter``.

    CJK ideographs, kana, hangul and CJK punctuation never take an
    inserted space next to each other.
    """
    if char and _CJK_CHAR.match(char):
        return CJK
    return LETTER
