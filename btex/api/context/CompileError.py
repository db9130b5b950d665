"""Compile error raised through the context."""

from typing import Any


class CompileError(Exception):
    """Typed failure propagated out of document compilation.

    Args:
        kind: Error kind identifier (e.g. ``UNKNOWN_EVENT``)
        token: Originating token, kept for diagnostics
        detail: Free-form detail, usually the offending name
    """

    def __init__(self, kind: str, token: Any = None, detail: str = ""):
        self.kind = kind
        self.token = token
        self.detail = detail
        message = f"{kind}: {detail}" if detail else kind
        if token is not None:
            message = f"{message} (at {token})"
        super().__init__(message)
