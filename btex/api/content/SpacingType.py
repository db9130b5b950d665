"""Spacing type model (UNO: single model)."""

from dataclasses import dataclass

LETTER = "letter"
CJK = "cjk"


@dataclass(frozen=True)
class SpacingType:
    """Spacing kinds at the leading and trailing edge of inline content."""

    first: str = LETTER
    last: str = LETTER
