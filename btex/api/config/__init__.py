"""Config API module."""

from .BtexConfig import BtexConfig
from .ConfigError import ConfigError
from .LogConfig import LogConfig
from .RefConfig import RefConfig
from .RenderConfig import RenderConfig

__all__ = ["BtexConfig", "ConfigError", "LogConfig", "RefConfig", "RenderConfig"]
