"""Reference configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CATEGORY_PREFIXES = ["Category:", "分类:"]


class RefConfig(BaseModel):
    """Reference resolution settings."""

    model_config = ConfigDict(extra="forbid")

    category_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORY_PREFIXES),
        description="Page prefixes marking the category namespace, one per supported locale",
    )
