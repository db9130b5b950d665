"""Reference resolution variants.

A resolution is computed from a normalised reference and consumed by the
renderer; exactly one variant applies to a node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..label.LabelTarget import LabelTarget


@dataclass(frozen=True)
class TargetResolution:
    """Reference to a declared label."""

    target: LabelTarget
    linked: bool = True

    kind = "target"


@dataclass(frozen=True)
class ExternalUrlResolution:
    """Reference to an accepted external URL."""

    url: str

    kind = "external_url"


@dataclass(frozen=True)
class LookupResolution:
    """Reference resolved later by key or page lookup."""

    key: str | None
    page: str | None
    inferred: bool = False
    linked: bool = True
    is_category: bool = False

    kind = "lookup"


Resolution = Union[TargetResolution, ExternalUrlResolution, LookupResolution]
