"""Render configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .ConfigError import ConfigError

DEFAULT_MIN_FONT_SIZE = 8.0
DEFAULT_MAX_FONT_SIZE = 72.0


class RenderConfig(BaseModel):
    """Presentation limits applied while rendering inline styles."""

    model_config = ConfigDict(extra="forbid")

    min_font_size: float = Field(DEFAULT_MIN_FONT_SIZE, gt=0, description="Smallest font size in px")
    max_font_size: float = Field(DEFAULT_MAX_FONT_SIZE, gt=0, description="Largest font size in px")

    @model_validator(mode="after")
    def _check_range(self) -> "RenderConfig":
        if self.min_font_size > self.max_font_size:
            raise ConfigError(
                f"min_font_size ({self.min_font_size}) must not exceed max_font_size ({self.max_font_size})"
            )
        return self
