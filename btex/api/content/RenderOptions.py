"""Render options model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config.RefConfig import DEFAULT_CATEGORY_PREFIXES
from ..config.RenderConfig import DEFAULT_MAX_FONT_SIZE, DEFAULT_MIN_FONT_SIZE

if TYPE_CHECKING:
    from ..config.BtexConfig import BtexConfig


@dataclass(frozen=True)
class RenderOptions:
    """Read-only settings shared by every render call of one output pass."""

    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    max_font_size: float = DEFAULT_MAX_FONT_SIZE
    category_prefixes: tuple[str, ...] = tuple(DEFAULT_CATEGORY_PREFIXES)

    @classmethod
    def from_config(cls, config: BtexConfig) -> RenderOptions:
        return cls(
            min_font_size=config.render.min_font_size,
            max_font_size=config.render.max_font_size,
            category_prefixes=tuple(config.ref.category_prefixes),
        )
