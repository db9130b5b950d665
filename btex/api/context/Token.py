"""Token model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """Source position handle, passed through to error reporting only."""

    line: int = 0
    column: int = 0
    text: str = ""

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.text!r}"
