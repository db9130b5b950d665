"""Scoped attribute context (UNO: single class)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from .CompileError import CompileError
from .UnknownEventError import UnknownEventError

if TYPE_CHECKING:
    from .Token import Token

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}

_ERROR_KINDS: dict[str, type[CompileError]] = {
    UnknownEventError.KIND: UnknownEventError,
}


class Context:
    """Attribute store for one document scope.

    Lookups check the current scope first and walk the parent chain only
    when ``local_only`` is false. All scopes of one tree share the root's
    ``external_links`` and ``references`` collections.
    """

    def __init__(self, parent: Context | None = None):
        self.parent = parent
        self.attributes: dict[str, str] = {}
        if parent is None:
            self.external_links: list[str] = []
            self.references: list[Any] = []
        else:
            self.external_links = parent.external_links
            self.references = parent.references

    def child(self) -> Context:
        """Open a nested scope inheriting from this one."""
        return Context(parent=self)

    def set(self, name: str, value: str) -> None:
        """Declare an attribute at this scope."""
        self.attributes[name] = value

    def get(self, name: str, local_only: bool = False) -> str | None:
        """Return the raw attribute value, or None if undeclared.

        Args:
            name: Attribute name (e.g. ``ref-page``)
            local_only: Only consult this scope, never the parents
        """
        scope: Context | None = self
        while scope is not None:
            if name in scope.attributes:
                return scope.attributes[name]
            if local_only:
                return None
            scope = scope.parent
        return None

    def get_boolean(self, name: str, default: bool, local_only: bool = False) -> bool:
        value = self.get(name, local_only)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        return default

    def get_float(self, name: str, default: float, local_only: bool = False) -> float:
        value = self.get(name, local_only)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def throw(self, kind: str, token: Token | None, detail: str = "") -> NoReturn:
        """Raise the typed failure registered for ``kind``."""
        error_cls = _ERROR_KINDS.get(kind, CompileError)
        raise error_cls(kind, token, detail)
