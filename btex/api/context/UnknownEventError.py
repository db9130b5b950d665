"""Unknown lifecycle event error."""

from typing import Any

from .CompileError import CompileError


class UnknownEventError(CompileError):
    """Raised when a node receives a lifecycle event it does not handle."""

    KIND = "UNKNOWN_EVENT"

    def __init__(self, kind: str = KIND, token: Any = None, detail: str = ""):
        super().__init__(kind, token, detail)

    @property
    def event_name(self) -> str:
        return self.detail
