"""Context domain: scoped attributes, tokens and compile errors."""

from .CompileError import CompileError
from .Context import Context
from .Token import Token
from .UnknownEventError import UnknownEventError

__all__ = ["CompileError", "Context", "Token", "UnknownEventError"]
