"""Label domain."""

from .LabelTarget import LabelTarget

__all__ = ["LabelTarget"]
